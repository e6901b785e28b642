from marshmallow import Schema, fields

from app.schemas.common_schema import ApiResponseSchema


class TweetContentRequestSchema(Schema):
    content = fields.String(required=True, metadata={'description': '트윗 내용'})


class TweetSchema(Schema):
    tweet_id = fields.String(metadata={'description': '트윗 ID'})
    content = fields.String(metadata={'description': '트윗 내용'})
    owner_id = fields.String(metadata={'description': '작성자 ID'})
    created_at = fields.String(allow_none=True)
    updated_at = fields.String(allow_none=True)


class TweetResponseSchema(ApiResponseSchema):
    data = fields.Nested(TweetSchema, allow_none=True)


class TweetListResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(TweetSchema), allow_none=True)
