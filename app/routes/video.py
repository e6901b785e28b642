from flask import g
from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.video import (
    GetVideoListRequestSchema, VideoPageResponseSchema,
    PublishVideoFormSchema, PublishVideoFilesSchema, VideoResponseSchema,
    VideoDetailResponseSchema,
    UpdateVideoFormSchema, UpdateVideoFilesSchema,
    PublishStatusResponseSchema
)
from app.schemas.common_schema import MessageResponseSchema
from app.services.video_service import VideoService
from common.decorator.auth_decorators import login_required

video_blueprint = Blueprint(
    'videos',
    __name__,
    url_prefix='/api/v1/videos',
    description='영상 게시/조회/수정/삭제 API'
)


@video_blueprint.route('/', methods=['GET'])
@login_required
@video_blueprint.arguments(GetVideoListRequestSchema, location='query')
@video_blueprint.response(200, VideoPageResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def get_all_videos(data):
    page = VideoService.get_all_videos(
        page=data.get('page'),
        limit=data.get('limit'),
        query=data.get('query'),
        sort_by=data.get('sort_by'),
        sort_type=data.get('sort_type'),
        user_id=data.get('user_id')
    )
    return ApiResponse(200, page, 'Videos fetched successfully')


@video_blueprint.route('/', methods=['POST'])
@login_required
@video_blueprint.arguments(PublishVideoFormSchema, location='form')
@video_blueprint.arguments(PublishVideoFilesSchema, location='files')
@video_blueprint.response(201, VideoResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def publish_video(form, files):
    video = VideoService.publish_video(
        g.user_id,
        form.get('title'),
        form.get('description'),
        files.get('video_file'),
        files.get('thumbnail')
    )
    return ApiResponse(201, video, 'Video published successfully')


@video_blueprint.route('/<video_id>', methods=['GET'])
@login_required
@video_blueprint.response(200, VideoDetailResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def get_video_by_id(video_id):
    video = VideoService.get_video_by_id(video_id, g.user_id)
    return ApiResponse(200, video, 'Video fetched successfully')


@video_blueprint.route('/<video_id>', methods=['PATCH'])
@login_required
@video_blueprint.arguments(UpdateVideoFormSchema, location='form')
@video_blueprint.arguments(UpdateVideoFilesSchema, location='files')
@video_blueprint.response(200, VideoResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def update_video(form, files, video_id):
    video = VideoService.update_video(
        video_id,
        g.user_id,
        form.get('title'),
        form.get('description'),
        files.get('thumbnail')
    )
    return ApiResponse(200, video, 'Video updated successfully')


@video_blueprint.route('/<video_id>', methods=['DELETE'])
@login_required
@video_blueprint.response(200, MessageResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def delete_video(video_id):
    VideoService.delete_video(video_id, g.user_id)
    return ApiResponse(200, {'message': 'Video deleted'}, 'Video deleted successfully')


@video_blueprint.route('/toggle/publish/<video_id>', methods=['PATCH'])
@login_required
@video_blueprint.response(200, PublishStatusResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_publish_status(video_id):
    status = VideoService.toggle_publish_status(video_id, g.user_id)
    return ApiResponse(200, status, 'Publish status toggled successfully')
