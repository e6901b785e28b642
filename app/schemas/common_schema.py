from marshmallow import Schema, fields


class ApiResponseSchema(Schema):
    status_code = fields.Integer(metadata={'description': 'HTTP 상태 코드'})
    data = fields.Raw(allow_none=True, metadata={'description': '응답 데이터'})
    message = fields.String(metadata={'description': '안내 메시지'})
    success = fields.Boolean(metadata={'description': '성공 여부'})


class MessageSchema(Schema):
    message = fields.String(metadata={'description': '안내 메시지'})


class MessageResponseSchema(ApiResponseSchema):
    data = fields.Nested(MessageSchema, allow_none=True)


class MediaFileSchema(Schema):
    url = fields.String(metadata={'description': '미디어 접근 URL'})
    storage_id = fields.String(metadata={'description': '저장소 식별자'})


class UserSummarySchema(Schema):
    user_id = fields.String(metadata={'description': '사용자 ID'})
    username = fields.String(allow_none=True, metadata={'description': '사용자 이름'})
    avatar = fields.String(allow_none=True, metadata={'description': '프로필 이미지 URL'})
    full_name = fields.String(allow_none=True, metadata={'description': '전체 이름'})
    subscribers_count = fields.Integer(allow_none=True, metadata={'description': '구독자 수'})
    is_subscribed = fields.Boolean(allow_none=True, metadata={'description': '현재 사용자 구독 여부'})


class PageSchema(Schema):
    page = fields.Integer(metadata={'description': '현재 페이지'})
    limit = fields.Integer(metadata={'description': '페이지 당 개수'})
    total_items = fields.Integer(metadata={'description': '전체 개수'})
    total_pages = fields.Integer(metadata={'description': '전체 페이지 수'})
    has_next = fields.Boolean(metadata={'description': '다음 페이지 존재 여부'})
    has_prev = fields.Boolean(metadata={'description': '이전 페이지 존재 여부'})
    prev_page = fields.Integer(allow_none=True, metadata={'description': '이전 페이지 번호'})
    next_page = fields.Integer(allow_none=True, metadata={'description': '다음 페이지 번호'})


class PaginationQuerySchema(Schema):
    #NOTE: 정수가 아닌 값도 받아서 서비스에서 기본값으로 정규화
    page = fields.String(load_default=None, metadata={'description': '페이지 번호 (1부터 시작)'})
    limit = fields.String(load_default=None, metadata={'description': '페이지 당 개수'})
