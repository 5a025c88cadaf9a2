"""Translation table and locale-aware date formatting."""

from __future__ import annotations

from datetime import date
from types import MappingProxyType

DEFAULT_LANGUAGE = "TH"

_TRANSLATIONS: dict[str, dict[str, str]] = {
    "internship_log": {"EN": "Internship Log", "TH": "บันทึกฝึกงาน"},
    "welcome_back": {"EN": "Welcome back", "TH": "ยินดีต้อนรับกลับ"},
    "sign_in": {"EN": "Sign In", "TH": "เข้าสู่ระบบ"},
    "sign_out": {"EN": "Sign Out", "TH": "ออกจากระบบ"},
    "email": {"EN": "Email", "TH": "อีเมล"},
    "email_required": {"EN": "Email is required", "TH": "กรุณากรอกอีเมล"},
    "new_entry": {"EN": "New Entry", "TH": "บันทึกใหม่"},
    "date": {"EN": "Date", "TH": "วันที่"},
    "description": {"EN": "Description", "TH": "รายละเอียด"},
    "save_entry": {"EN": "Save Entry", "TH": "บันทึกข้อมูล"},
    "recent_logs": {"EN": "Recent Logs", "TH": "บันทึกล่าสุด"},
    "export_excel": {"EN": "Export to Excel", "TH": "ส่งออกเป็น Excel"},
    "exported_to": {"EN": "Exported to", "TH": "ส่งออกไปที่"},
    "export_failed": {"EN": "Export failed", "TH": "ส่งออกไม่สำเร็จ"},
    "no_logs": {"EN": "No logs found.", "TH": "ไม่พบข้อมูลบันทึก"},
    "start_adding": {
        "EN": "Start by adding your first entry!",
        "TH": "เริ่มต้นด้วยการเพิ่มบันทึกแรกของคุณ!",
    },
    "placeholder_desc": {"EN": "What did you learn today?", "TH": "วันนี้เรียนรู้อะไรบ้าง?"},
    "view_list": {"EN": "List View", "TH": "มุมมองรายการ"},
    "view_grid": {"EN": "Grid View", "TH": "มุมมองการ์ด"},
    "view_table": {"EN": "Table View", "TH": "มุมมองตาราง"},
    "view_calendar": {"EN": "Calendar View", "TH": "มุมมองปฏิทิน"},
    "delete": {"EN": "Delete", "TH": "ลบข้อมูล"},
    "deleted": {"EN": "Deleted", "TH": "ลบแล้ว"},
    "select_all": {"EN": "Select All", "TH": "เลือกทั้งหมด"},
    "deselect_all": {"EN": "Deselect All", "TH": "ยกเลิกการเลือก"},
    "selected": {"EN": "Selected", "TH": "เลือกแล้ว"},
    "nothing_selected": {"EN": "Nothing selected", "TH": "ยังไม่ได้เลือกรายการ"},
    "confirm_delete_title": {"EN": "Confirm Deletion", "TH": "ยืนยันการลบ"},
    "confirm_delete_msg": {
        "EN": "Are you sure you want to delete the selected logs? This action cannot be undone.",
        "TH": "คุณแน่ใจหรือไม่ที่จะลบข้อมูลที่เลือก? การกระทำนี้ไม่สามารถย้อนกลับได้",
    },
    "type_confirm": {"EN": 'Type "confirm" to proceed', "TH": 'พิมพ์ "ยืนยัน" เพื่อดำเนินการต่อ'},
    "confirm_keyword": {"EN": "confirm", "TH": "ยืนยัน"},
    "cancel": {"EN": "Cancel", "TH": "ยกเลิก"},
    "log_details": {"EN": "Log Details", "TH": "รายละเอียดบันทึก"},
    "close": {"EN": "Close", "TH": "ปิด"},
    "edit": {"EN": "Edit", "TH": "แก้ไข"},
    "edit_entry": {"EN": "Edit Entry", "TH": "แก้ไขบันทึก"},
    "save_changes": {"EN": "Save Changes", "TH": "บันทึกการแก้ไข"},
    "saved": {"EN": "Saved", "TH": "บันทึกแล้ว"},
    "save_failed": {"EN": "Failed to save log.", "TH": "บันทึกข้อมูลไม่สำเร็จ"},
    "delete_failed": {"EN": "Failed to delete logs", "TH": "ลบข้อมูลไม่สำเร็จ"},
    "load_failed": {"EN": "Could not load logs", "TH": "โหลดข้อมูลไม่สำเร็จ"},
    "loading": {"EN": "Loading...", "TH": "กำลังโหลด..."},
    "hours": {"EN": "Hours", "TH": "ชั่วโมง"},
    "hours_suffix": {"EN": "hrs", "TH": "ชม."},
    "hours_not_recorded": {"EN": "Not recorded", "TH": "ไม่ระบุ"},
    "full_day": {"EN": "Full day (8)", "TH": "เต็มวัน (8)"},
    "half_day": {"EN": "Half day (4)", "TH": "ครึ่งวัน (4)"},
    "custom": {"EN": "Custom", "TH": "กำหนดเอง"},
    "custom_hours": {"EN": "Custom hours", "TH": "จำนวนชั่วโมง"},
    "invalid_hours": {"EN": "Hours must be a number", "TH": "ชั่วโมงต้องเป็นตัวเลข"},
    "invalid_date": {"EN": "Date must be YYYY-MM-DD", "TH": "วันที่ต้องอยู่ในรูปแบบ YYYY-MM-DD"},
    "description_required": {"EN": "Description is required", "TH": "กรุณากรอกรายละเอียด"},
    "total_summary": {"EN": "Total Summary", "TH": "สรุปผลการฝึกงาน"},
    "days": {"EN": "Days", "TH": "วัน"},
    "months": {"EN": "Months", "TH": "จำนวนเดือน"},
    "total_hours": {"EN": "Total Hours", "TH": "ชั่วโมงทั้งหมด"},
    "work_days": {"EN": "Work Days", "TH": "วันทำงาน"},
    "days_off": {"EN": "Days Off", "TH": "วันหยุด/ลา"},
    "months_suffix": {"EN": "months", "TH": "เดือน"},
    "days_suffix": {"EN": "days", "TH": "วัน"},
    "date_range": {"EN": "Period", "TH": "ช่วงเวลา"},
    "no_records": {"EN": "No records", "TH": "ไม่มีข้อมูล"},
    "work_link": {"EN": "Work Link (Optional)", "TH": "ลิงก์งาน (ไม่บังคับ)"},
    "link": {"EN": "Link", "TH": "ลิงก์"},
    "view_work": {"EN": "View Work", "TH": "ดูผลงาน"},
    "holiday_leave": {"EN": "Holiday / Leave", "TH": "วันหยุด / ลา"},
    "status": {"EN": "Status", "TH": "สถานะ"},
    "status_work": {"EN": "Work", "TH": "ทำงาน"},
    "status_holiday": {"EN": "Holiday / Leave", "TH": "วันหยุด / ลา"},
    "work_description": {"EN": "Work Description", "TH": "รายละเอียดงาน"},
    "theme": {"EN": "Theme", "TH": "ธีม"},
    "language": {"EN": "Language", "TH": "ภาษา"},
}

TRANSLATIONS = MappingProxyType(
    {key: MappingProxyType(values) for key, values in _TRANSLATIONS.items()}
)

_MONTHS = {
    "EN": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "TH": (
        "มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
        "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม",
    ),
}

_MONTHS_SHORT = {
    "EN": ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    "TH": (
        "ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.",
        "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค.",
    ),
}

# Sunday first, matching the calendar grid.
_WEEKDAYS_SHORT = {
    "EN": ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
    "TH": ("อา.", "จ.", "อ.", "พ.", "พฤ.", "ศ.", "ส."),
}

# Thai dates are shown in the Buddhist era.
_YEAR_OFFSET = {"EN": 0, "TH": 543}


class Translator:
    """Key lookup for one locale."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        if language not in _YEAR_OFFSET:
            language = DEFAULT_LANGUAGE
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def t(self, key: str, default: str | None = None) -> str:
        """Translate a key, falling back to `default` and then to the key itself."""
        value = TRANSLATIONS.get(key, {}).get(self._language)
        if value:
            return value
        return default if default is not None else key

    def toggled(self) -> Translator:
        return Translator("EN" if self._language == "TH" else "TH")

    def month_name(self, month: int) -> str:
        return _MONTHS[self._language][month - 1]

    def weekday_headers(self) -> tuple[str, ...]:
        return _WEEKDAYS_SHORT[self._language]

    def year(self, year: int) -> int:
        return year + _YEAR_OFFSET[self._language]

    def format_date(self, d: date) -> str:
        """Short display form, e.g. '10 Jan 2024'."""
        month = _MONTHS_SHORT[self._language][d.month - 1]
        return f"{d.day} {month} {self.year(d.year)}"

    def format_long_date(self, d: date) -> str:
        """Long display form with weekday, e.g. 'We 10 January 2024'."""
        weekday = _WEEKDAYS_SHORT[self._language][(d.weekday() + 1) % 7]
        return f"{weekday} {d.day} {self.month_name(d.month)} {self.year(d.year)}"

    def format_month(self, year: int, month: int) -> str:
        return f"{self.month_name(month)} {self.year(year)}"
