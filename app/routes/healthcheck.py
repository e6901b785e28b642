from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.common_schema import MessageResponseSchema
from common.decorator.auth_decorators import public_route

healthcheck_blueprint = Blueprint(
    'healthcheck',
    __name__,
    url_prefix='/api/v1/healthcheck',
    description='서비스 상태 확인'
)


@healthcheck_blueprint.route('/', methods=['GET'])
@public_route
@healthcheck_blueprint.response(200, MessageResponseSchema)
def healthcheck():
    return ApiResponse(200, {'message': 'Everything is O.K'}, 'OK')
