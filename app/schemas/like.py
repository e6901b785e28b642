from marshmallow import Schema, fields

from app.schemas.common_schema import ApiResponseSchema
from app.schemas.video import VideoSchema


class ToggleLikeSchema(Schema):
    is_liked = fields.Boolean(metadata={'description': '토글 이후 좋아요 여부'})


class LikedVideoSchema(Schema):
    liked_at = fields.String(allow_none=True, metadata={'description': '좋아요 시각'})
    liked_video = fields.Nested(VideoSchema)


class ToggleLikeResponseSchema(ApiResponseSchema):
    data = fields.Nested(ToggleLikeSchema, allow_none=True)


class LikedVideoListResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(LikedVideoSchema), allow_none=True)
