# core/prompt_builder.py
from typing import Final
from core.nls_framework import NLS_FRAMEWORK_DATA
from model.lesson import LessonInfo, ProcessingOptions

ANALYZE_ONLY_REQUIREMENTS: Final[str] = """
- Chỉ phân tích giáo án gốc và đề xuất các năng lực số phù hợp.
- KHÔNG chỉnh sửa nội dung giáo án gốc.
"""

INTEGRATE_REQUIREMENTS: Final[str] = """
- Tích hợp năng lực số vào giáo án theo hướng dẫn.
- Giữ nguyên toàn bộ định dạng và nội dung gốc.
- Chèn nội dung NLS bằng thẻ <u>...</u>.
"""

DETAILED_REPORT_REQUIREMENT: Final[str] = """
- Kèm theo báo cáo chi tiết về lý do chọn từng năng lực số.
"""


def _header(lesson: LessonInfo) -> str:
    return f"""
THÔNG TIN BÀI HỌC:
- Bộ sách: {lesson.textbook}
- Môn học: {lesson.subject}
- Lớp: {lesson.grade}

NỘI DUNG GIÁO ÁN GỐC:
{lesson.content}
"""


def _distribution_block(distribution: str) -> str:
    return f"""

PHÂN PHỐI CHƯƠNG TRÌNH (PPCT) - THAM KHẢO:
{distribution}

LƯU Ý: Nếu PPCT có quy định cụ thể về năng lực số cho bài học này, hãy ưu tiên tuân thủ PPCT.
"""


def build_user_prompt(lesson: LessonInfo, options: ProcessingOptions) -> str:
    """
    Assemble the user prompt for one lesson. Pure: same inputs, same text.

    Order: lesson header, optional PPCT block, NLS framework, requirements
    (analysis-only or integration), optional detailed-report instruction.
    """
    prompt = _header(lesson)

    distribution = lesson.distributionContent or ""
    if distribution.strip():
        prompt += _distribution_block(distribution)

    prompt += f"""

KHUNG NĂNG LỰC SỐ:
{NLS_FRAMEWORK_DATA}

YÊU CẦU:
"""

    if options.analyzeOnly:
        prompt += ANALYZE_ONLY_REQUIREMENTS
    else:
        prompt += INTEGRATE_REQUIREMENTS

    if options.detailedReport:
        prompt += DETAILED_REPORT_REQUIREMENT

    return prompt
