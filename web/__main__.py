"""
Web 진입점

실행 방법:
    python -m web

Host/Port는 HOST, PORT 환경 변수 또는 secrets.yaml web 섹션.
"""

import uvicorn

from core.config.loader import get_settings

if __name__ == "__main__":
    web_config = get_settings().web
    uvicorn.run(
        "web.app:app",
        host=web_config.host,
        port=web_config.port,
        reload=False,
    )
