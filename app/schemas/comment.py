from marshmallow import Schema, fields

from app.schemas.common_schema import ApiResponseSchema, PageSchema, UserSummarySchema


class CommentContentRequestSchema(Schema):
    content = fields.String(required=True, metadata={'description': '댓글 내용'})


class CommentSchema(Schema):
    comment_id = fields.String(metadata={'description': '댓글 ID'})
    video_id = fields.String(metadata={'description': '영상 ID'})
    content = fields.String(metadata={'description': '댓글 내용'})
    owner_id = fields.String(allow_none=True, metadata={'description': '작성자 ID'})
    created_at = fields.String(allow_none=True)
    updated_at = fields.String(allow_none=True)
    owner = fields.Nested(UserSummarySchema, allow_none=True)
    likes_count = fields.Integer(metadata={'description': '좋아요 수'})
    is_liked = fields.Boolean(metadata={'description': '현재 사용자 좋아요 여부'})


class CommentPageSchema(PageSchema):
    items = fields.List(fields.Nested(CommentSchema), metadata={'description': '댓글 목록'})


class CommentResponseSchema(ApiResponseSchema):
    data = fields.Nested(CommentSchema, allow_none=True)


class CommentPageResponseSchema(ApiResponseSchema):
    data = fields.Nested(CommentPageSchema, allow_none=True)
