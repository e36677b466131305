"""UI labels and fixed messages (Thai)."""

PAGE_TITLE = "ทำเนียบสมาชิกสภาผู้แทนราษฎร"

FIELD_LABELS = {
    "prefix": "คำนำหน้า",
    "first_name": "ชื่อ",
    "last_name": "นามสกุล",
    "ministry": "ตำแหน่งรัฐมนตรี",
    "department": "กระทรวง",
    "history": "ประวัติการทำงาน",
    "works": "ผลงานที่ผ่านมา",
    "party": "สังกัดพรรคการเมือง",
    "photo": 'รูปถ่าย 2"',
}

REQUIRED_MESSAGES = {
    "prefix": "กรุณาใส่คำนำหน้า",
    "first_name": "กรุณาใส่ชื่อ",
    "last_name": "กรุณาใส่นามสกุล",
}

# Buttons
SUBMIT_ADD = "เพิ่มสมาชิก"
SUBMIT_EDIT = "บันทึกการแก้ไข"
RESET = "ล้างแบบฟอร์ม"
CANCEL_EDIT = "ยกเลิกการแก้ไข"
EDIT = "แก้ไข"
DELETE = "ลบ"

# Table
TABLE_TITLE = "รายชื่อสมาชิก ({count})"
TABLE_COLUMNS = ["ชื่อ-นามสกุล", "ตำแหน่ง", "กระทรวง", "พรรค", "จัดการ"]
EMPTY_STATE = "ยังไม่มีข้อมูล"
EDIT_TARGET_GONE = "ไม่พบสมาชิกที่กำลังแก้ไข ข้อมูลอาจถูกลบไปแล้ว"
