import os
import sys

import pytest
from fastapi.testclient import TestClient

# 테스트 환경 설정
os.environ["APP_ENV"] = "test"

# 프로젝트 루트를 path에 추가
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.api.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
