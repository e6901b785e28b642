"""
Utils package
유틸리티 함수들을 모아둔 패키지

- jwt_utils: JWT 토큰 생성 및 검증
- object_id: 식별자 검증
- ownership: 소유자 권한 확인
- pipeline: aggregation stage 헬퍼
- pagination: aggregation 페이지네이션
- toggle: 존재 여부 토글 (좋아요, 구독)
- media_storage: 업로드 미디어 저장
"""

from common.utils.jwt_utils import (
    decode_token,
    decode_access_token,
    create_access_token
)

__all__ = [
    'decode_token',
    'decode_access_token',
    'create_access_token'
]
