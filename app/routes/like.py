from flask import g
from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.like import LikedVideoListResponseSchema, ToggleLikeResponseSchema
from app.services.like_service import LikeService
from common.decorator.auth_decorators import login_required

like_blueprint = Blueprint(
    'likes',
    __name__,
    url_prefix='/api/v1/likes',
    description='영상/댓글/트윗 좋아요 API'
)


@like_blueprint.route('/toggle/v/<video_id>', methods=['POST'])
@login_required
@like_blueprint.response(200, ToggleLikeResponseSchema)
@like_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_video_like(video_id):
    result = LikeService.toggle_video_like(video_id, g.user_id)
    return ApiResponse(200, result, 'Video like toggled successfully')


@like_blueprint.route('/toggle/c/<comment_id>', methods=['POST'])
@login_required
@like_blueprint.response(200, ToggleLikeResponseSchema)
@like_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_comment_like(comment_id):
    result = LikeService.toggle_comment_like(comment_id, g.user_id)
    return ApiResponse(200, result, 'Comment like toggled successfully')


@like_blueprint.route('/toggle/t/<tweet_id>', methods=['POST'])
@login_required
@like_blueprint.response(200, ToggleLikeResponseSchema)
@like_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_tweet_like(tweet_id):
    result = LikeService.toggle_tweet_like(tweet_id, g.user_id)
    return ApiResponse(200, result, 'Tweet like toggled successfully')


@like_blueprint.route('/videos', methods=['GET'])
@login_required
@like_blueprint.response(200, LikedVideoListResponseSchema)
@like_blueprint.doc(security=[{"BearerAuth": []}])
def get_liked_videos():
    videos = LikeService.get_liked_videos(g.user_id)
    return ApiResponse(200, videos, 'Liked videos fetched successfully')
