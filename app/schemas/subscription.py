from marshmallow import Schema, fields

from app.schemas.common_schema import ApiResponseSchema, UserSummarySchema


class ToggleSubscriptionSchema(Schema):
    subscribed = fields.Boolean(metadata={'description': '토글 이후 구독 여부'})


class SubscriberSchema(Schema):
    subscription_id = fields.String()
    subscriber = fields.Nested(UserSummarySchema, allow_none=True)
    subscribed_at = fields.String(allow_none=True)


class SubscribedChannelSchema(Schema):
    subscription_id = fields.String()
    subscribed_channel = fields.Nested(UserSummarySchema, allow_none=True)
    subscribed_at = fields.String(allow_none=True)


class ToggleSubscriptionResponseSchema(ApiResponseSchema):
    data = fields.Nested(ToggleSubscriptionSchema, allow_none=True)


class SubscriberListResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(SubscriberSchema), allow_none=True)


class SubscribedChannelListResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(SubscribedChannelSchema), allow_none=True)
