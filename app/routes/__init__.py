"""
Routes package
Flask Blueprint들을 관리하는 패키지
"""

from app.routes.video import video_blueprint
from app.routes.comment import comment_blueprint
from app.routes.like import like_blueprint
from app.routes.subscription import subscription_blueprint
from app.routes.tweet import tweet_blueprint
from app.routes.healthcheck import healthcheck_blueprint
from app.routes.media import media_blueprint

API_BLUEPRINTS = (
    video_blueprint,
    comment_blueprint,
    like_blueprint,
    subscription_blueprint,
    tweet_blueprint,
    healthcheck_blueprint,
)

__all__ = [
    'video_blueprint',
    'comment_blueprint',
    'like_blueprint',
    'subscription_blueprint',
    'tweet_blueprint',
    'healthcheck_blueprint',
    'media_blueprint',
    'API_BLUEPRINTS'
]
