from enum import Enum

class APIError(Enum):
    # 1. 공통 에러
    INTERNAL_SERVER_ERROR = ("C001", "Internal server error.", 500)
    INVALID_INPUT_VALUE  = ("C002", "Invalid input value.", 400)
    DB_ERROR = ("C003", "Database operation failed.", 500)
    INVALID_ID = ("C004", "Invalid identifier.", 400)
    DUPLICATE_RESOURCE = ("C005", "Resource already exists.", 409)
    RESOURCE_NOT_FOUND = ("C006", "Requested resource was not found.", 404)
    METHOD_NOT_ALLOWED = ("C007", "Method not allowed.", 405)

    # 2. 인증(Auth) 관련
    AUTH_TOKEN_EXPIRED   = ("A001", "Access token has expired.", 401)
    AUTH_INVALID_TOKEN   = ("A002", "Invalid access token.", 401)

    # 3. 사용자(User) 관련
    USER_NOT_FOUND       = ("U001", "User not found.", 404)

    # 4. 영상(Video) 관련
    VIDEO_NOT_FOUND      = ("V001", "Video not found.", 404)
    VIDEO_FORBIDDEN      = ("V002", "You are not the owner of this video.", 403)
    VIDEO_MEDIA_REQUIRED = ("V003", "Video file and thumbnail are required.", 400)
    VIDEO_MEDIA_UNAVAILABLE = ("V004", "Uploaded media is unavailable.", 400)

    # 5. 댓글(Comment) 관련
    COMMENT_NOT_FOUND    = ("M001", "Comment not found.", 404)
    COMMENT_FORBIDDEN    = ("M002", "You are not the owner of this comment.", 403)

    # 6. 트윗(Tweet) 관련
    TWEET_NOT_FOUND      = ("T001", "Tweet not found.", 404)
    TWEET_FORBIDDEN      = ("T002", "You are not the owner of this tweet.", 403)

    # 7. 구독(Subscription) 관련
    CHANNEL_NOT_FOUND    = ("S001", "Channel not found.", 404)
    SELF_SUBSCRIPTION    = ("S002", "You cannot subscribe to your own channel.", 400)

    def __init__(self, code, message, status):
        self.code = code
        self.message = message
        self.status = status
