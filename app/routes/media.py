from flask import Blueprint, send_from_directory

import common.extensions as extensions

#NOTE: 로컬 저장소 파일 서빙용. API 문서에는 노출하지 않으므로 flask 기본 Blueprint 사용
media_blueprint = Blueprint('media', __name__, url_prefix='/media')


@media_blueprint.route('/<path:storage_id>', methods=['GET'])
def serve_media(storage_id):
    return send_from_directory(extensions.media_storage.upload_dir, storage_id)
