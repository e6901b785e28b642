from flask_smorest.fields import Upload
from marshmallow import Schema, fields, validate

from app.models.mongodb.pipelines import VIDEO_SORT_FIELDS
from app.schemas.common_schema import (
    ApiResponseSchema, MediaFileSchema, PageSchema, PaginationQuerySchema, UserSummarySchema
)


class GetVideoListRequestSchema(PaginationQuerySchema):
    query = fields.String(load_default=None, metadata={'description': '제목/설명 검색어'})
    sort_by = fields.String(
        load_default=None,
        validate=validate.OneOf(VIDEO_SORT_FIELDS),
        metadata={'description': '정렬 기준 (created_at, views, duration, title)'}
    )
    sort_type = fields.String(
        load_default=None,
        validate=validate.OneOf(['asc', 'desc']),
        metadata={'description': '정렬 방향 (asc, desc)'}
    )
    user_id = fields.String(load_default=None, metadata={'description': '소유자 ID 필터'})


class PublishVideoFormSchema(Schema):
    title = fields.String(load_default=None, metadata={'description': '영상 제목'})
    description = fields.String(load_default=None, metadata={'description': '영상 설명'})


class PublishVideoFilesSchema(Schema):
    video_file = Upload(metadata={'description': '영상 파일'})
    thumbnail = Upload(metadata={'description': '썸네일 이미지'})


class UpdateVideoFormSchema(Schema):
    title = fields.String(load_default=None, metadata={'description': '영상 제목'})
    description = fields.String(load_default=None, metadata={'description': '영상 설명'})


class UpdateVideoFilesSchema(Schema):
    thumbnail = Upload(metadata={'description': '새 썸네일 이미지 (선택)'})


class VideoSchema(Schema):
    video_id = fields.String(metadata={'description': '영상 ID'})
    title = fields.String(metadata={'description': '영상 제목'})
    description = fields.String(metadata={'description': '영상 설명'})
    video_file = fields.Nested(MediaFileSchema, allow_none=True)
    thumbnail = fields.Nested(MediaFileSchema, allow_none=True)
    duration = fields.Float(metadata={'description': '영상 길이 (초)'})
    views = fields.Integer(metadata={'description': '조회수'})
    is_published = fields.Boolean(metadata={'description': '공개 여부'})
    owner_id = fields.String(allow_none=True, metadata={'description': '소유자 ID'})
    created_at = fields.String(allow_none=True)
    updated_at = fields.String(allow_none=True)
    owner = fields.Nested(UserSummarySchema, allow_none=True)


class VideoDetailSchema(Schema):
    video_id = fields.String(metadata={'description': '영상 ID'})
    title = fields.String()
    description = fields.String()
    video_file = fields.Nested(MediaFileSchema, allow_none=True)
    thumbnail = fields.Nested(MediaFileSchema, allow_none=True)
    duration = fields.Float()
    views = fields.Integer()
    is_published = fields.Boolean()
    created_at = fields.String(allow_none=True)
    owner = fields.Nested(UserSummarySchema, allow_none=True, metadata={'description': '소유자 (구독자 수, 구독 여부 포함)'})
    likes_count = fields.Integer(metadata={'description': '좋아요 수'})
    is_liked = fields.Boolean(metadata={'description': '현재 사용자 좋아요 여부'})


class VideoPageSchema(PageSchema):
    items = fields.List(fields.Nested(VideoSchema), metadata={'description': '영상 목록'})


class PublishStatusSchema(Schema):
    video_id = fields.String()
    is_published = fields.Boolean()


class VideoResponseSchema(ApiResponseSchema):
    data = fields.Nested(VideoSchema, allow_none=True)


class VideoDetailResponseSchema(ApiResponseSchema):
    data = fields.Nested(VideoDetailSchema, allow_none=True)


class VideoPageResponseSchema(ApiResponseSchema):
    data = fields.Nested(VideoPageSchema, allow_none=True)


class PublishStatusResponseSchema(ApiResponseSchema):
    data = fields.Nested(PublishStatusSchema, allow_none=True)
