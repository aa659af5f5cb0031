"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- data: 계정 데이터 조회/동기화
"""
