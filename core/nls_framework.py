# core/nls_framework.py
from typing import Final

# Khung năng lực số cho người học (Thông tư 02/2025/TT-BGDĐT), rút gọn theo
# 6 miền và các năng lực thành phần. Mức độ: CB (cơ bản, lớp 1-5),
# TC (trung cấp, lớp 6-9), NC (nâng cao, lớp 10-12).
NLS_FRAMEWORK_DATA: Final[str] = """\
MIỀN 1. KHAI THÁC DỮ LIỆU VÀ THÔNG TIN
- 1.1 Duyệt, tìm kiếm và lọc dữ liệu, thông tin và nội dung số
  + CB: Tìm kiếm thông tin đơn giản theo hướng dẫn trên các thiết bị, trang web quen thuộc.
  + TC: Tự xác định nhu cầu thông tin, dùng từ khóa phù hợp, lọc kết quả tìm kiếm.
  + NC: Xây dựng chiến lược tìm kiếm, kết hợp nhiều nguồn và công cụ tìm kiếm nâng cao.
- 1.2 Đánh giá dữ liệu, thông tin và nội dung số
  + CB: Nhận biết thông tin đúng/sai rõ ràng với sự hỗ trợ của giáo viên.
  + TC: So sánh, đối chiếu độ tin cậy của các nguồn thông tin.
  + NC: Phân tích, phản biện, đánh giá độ tin cậy và tính khách quan của nguồn.
- 1.3 Quản lý dữ liệu, thông tin và nội dung số
  + CB: Lưu, mở lại tệp trong thư mục theo hướng dẫn.
  + TC: Tổ chức thư mục, đặt tên tệp hợp lý, sử dụng lưu trữ đám mây.
  + NC: Quản lý, sao lưu, xử lý dữ liệu có cấu trúc phục vụ học tập.

MIỀN 2. GIAO TIẾP VÀ HỢP TÁC TRONG MÔI TRƯỜNG SỐ
- 2.1 Tương tác thông qua công nghệ số
  + CB: Sử dụng công cụ nhắn tin, thư điện tử đơn giản dưới sự giám sát.
  + TC: Lựa chọn công cụ giao tiếp số phù hợp với mục đích.
  + NC: Phối hợp nhiều công cụ giao tiếp số một cách hiệu quả.
- 2.2 Chia sẻ thông tin và nội dung thông qua công nghệ số
  + CB: Chia sẻ sản phẩm học tập với lớp theo hướng dẫn.
  + TC: Chia sẻ có trích dẫn nguồn, tôn trọng quyền tác giả.
  + NC: Chọn kênh, định dạng chia sẻ phù hợp với đối tượng.
- 2.3 Hợp tác thông qua công nghệ số
  + CB: Tham gia hoạt động nhóm trên nền tảng số quen thuộc.
  + TC: Cùng soạn thảo, chỉnh sửa tài liệu trực tuyến.
  + NC: Tổ chức, điều phối dự án nhóm trên môi trường số.
- 2.4 Quy tắc ứng xử trên mạng
  + CB: Biết ứng xử lịch sự, không nói xấu người khác trên mạng.
  + TC: Tuân thủ quy tắc ứng xử, nhận biết và phản ứng với bắt nạt trực tuyến.
  + NC: Lan tỏa văn hóa ứng xử tích cực trong cộng đồng số.
- 2.5 Quản lý danh tính số
  + CB: Nhận biết thông tin cá nhân cần giữ bí mật.
  + TC: Quản lý hồ sơ, dấu vết số của bản thân.
  + NC: Xây dựng, bảo vệ hình ảnh số tích cực của bản thân.

MIỀN 3. SÁNG TẠO NỘI DUNG SỐ
- 3.1 Phát triển nội dung số
  + CB: Tạo sản phẩm đơn giản (văn bản, hình vẽ) bằng phần mềm quen thuộc.
  + TC: Tạo bài trình chiếu, video, sơ đồ tư duy phục vụ học tập.
  + NC: Thiết kế sản phẩm số đa phương tiện có chủ đích.
- 3.2 Tích hợp và tái tạo nội dung số
  + CB: Chỉnh sửa, bổ sung nội dung có sẵn theo hướng dẫn.
  + TC: Kết hợp nhiều nguồn nội dung để tạo sản phẩm mới.
  + NC: Tái cấu trúc, phát triển nội dung số thành sản phẩm có giá trị mới.
- 3.3 Bản quyền và giấy phép
  + CB: Biết sản phẩm của người khác cần được tôn trọng.
  + TC: Trích dẫn nguồn, nhận biết các loại giấy phép phổ biến.
  + NC: Áp dụng đúng quy định bản quyền, giấy phép mở khi sử dụng và chia sẻ.
- 3.4 Lập trình
  + CB: Thực hiện chuỗi lệnh đơn giản trong môi trường lập trình trực quan.
  + TC: Viết chương trình có cấu trúc rẽ nhánh, lặp để giải bài toán.
  + NC: Thiết kế thuật toán, lập trình giải quyết vấn đề thực tiễn.

MIỀN 4. AN TOÀN
- 4.1 Bảo vệ thiết bị
  + CB: Sử dụng thiết bị đúng cách, biết tắt/mở an toàn.
  + TC: Cài đặt, cập nhật phần mềm bảo vệ, nhận biết phần mềm độc hại.
  + NC: Thiết lập biện pháp bảo mật phù hợp cho thiết bị cá nhân.
- 4.2 Bảo vệ dữ liệu cá nhân và quyền riêng tư
  + CB: Không chia sẻ mật khẩu, thông tin cá nhân.
  + TC: Đặt mật khẩu mạnh, thiết lập quyền riêng tư.
  + NC: Đánh giá rủi ro và áp dụng chính sách bảo vệ dữ liệu.
- 4.3 Bảo vệ sức khỏe và an sinh số
  + CB: Sử dụng thiết bị số đúng thời lượng, đúng tư thế.
  + TC: Cân bằng thời gian trực tuyến và ngoại tuyến.
  + NC: Chủ động phòng tránh các tác động tiêu cực của công nghệ.
- 4.4 Bảo vệ môi trường
  + CB: Tiết kiệm điện khi sử dụng thiết bị.
  + TC: Hiểu tác động của công nghệ số đến môi trường.
  + NC: Đề xuất giải pháp sử dụng công nghệ bền vững.

MIỀN 5. GIẢI QUYẾT VẤN ĐỀ
- 5.1 Giải quyết các vấn đề kỹ thuật
  + CB: Nhận biết và báo cáo sự cố đơn giản.
  + TC: Tự khắc phục các lỗi kỹ thuật thường gặp.
  + NC: Chẩn đoán, xử lý sự cố phức tạp hơn.
- 5.2 Xác định nhu cầu và giải pháp công nghệ
  + CB: Chọn công cụ số phù hợp theo gợi ý.
  + TC: Đánh giá, lựa chọn công cụ số cho nhiệm vụ học tập.
  + NC: Tùy biến, kết hợp công cụ số cho nhu cầu cá nhân.
- 5.3 Sử dụng sáng tạo công nghệ số
  + CB: Dùng công cụ số để thể hiện ý tưởng.
  + TC: Sử dụng công nghệ số để giải quyết vấn đề học tập.
  + NC: Ứng dụng công nghệ số để đổi mới, giải quyết vấn đề thực tiễn.
- 5.4 Xác định thiếu hụt về năng lực số
  + CB: Nhận biết điều mình chưa biết khi dùng công nghệ.
  + TC: Tự tìm hiểu để bổ sung kỹ năng số còn thiếu.
  + NC: Lập kế hoạch phát triển năng lực số của bản thân.

MIỀN 6. ỨNG DỤNG TRÍ TUỆ NHÂN TẠO
- 6.1 Hiểu biết về trí tuệ nhân tạo
  + CB: Nhận biết các ứng dụng AI quen thuộc trong đời sống.
  + TC: Giải thích nguyên lý cơ bản và giới hạn của AI.
  + NC: Phân tích cách AI học từ dữ liệu và các rủi ro sai lệch.
- 6.2 Sử dụng trí tuệ nhân tạo
  + CB: Sử dụng công cụ AI đơn giản dưới sự hướng dẫn.
  + TC: Đặt câu lệnh (prompt) rõ ràng, kiểm chứng kết quả do AI tạo ra.
  + NC: Khai thác AI hiệu quả, có trách nhiệm cho học tập và sáng tạo.
- 6.3 Đánh giá trí tuệ nhân tạo
  + CB: Biết AI có thể đưa ra câu trả lời sai.
  + TC: Đánh giá độ chính xác, tính công bằng của sản phẩm AI.
  + NC: Nhận định tác động đạo đức, xã hội của AI và sử dụng có đạo đức.
"""
