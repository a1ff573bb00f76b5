"""
Shared pytest fixtures and configuration for naming-study tests.

This module provides:
- Logging and settings reset between tests
- The exact text ``run_all()`` prints, for golden comparisons
"""

import sys
from pathlib import Path

import pytest

# Ensure naming_study package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from naming_study.core.logging import configure_logging
from naming_study.core.settings import clear_settings_cache


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test as a unit test."""
    for item in items:
        item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structlog at WARNING and drop cached settings."""
    configure_logging(level="WARNING")
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def expected_full_output() -> str:
    return (
        "===== 1. 의도를 분명히 하라 =====\n"
        "Bad: d = 5\n"
        "Good: elapsedTimeInDays = 5\n"
        "\n"
        "===== 2. 그릇된 정보와 혼동을 피하라 =====\n"
        "Bad: accountList = user123\n"
        "Good: accountId = user123\n"
        "\n"
        "===== 3. 의미 있게 구분하고 일관된 어휘를 유지하라 =====\n"
        "Bad: getUserData(), fetchCustomerData(), retrieveClientData()\n"
        "Good: fetchUserData(), fetchCustomerDataUnified()\n"
        "\n"
        "===== 4. 발음하기 쉽고 검색 가능한 이름을 써라 =====\n"
        "Bad: genymdhms = 1735689600000\n"
        "Good: generationTimestamp = 1735689600000\n"
        "\n"
        "===== 5. 인코딩과 불필요한 접두어를 피하라 =====\n"
        "Bad: m_nUserCount = 10\n"
        "Good: userCount = 10\n"
        "\n"
        "===== 6. 명사와 동사의 구분 =====\n"
        "Bad: customer() called for 홍길동\n"
        "Good: save() called for 홍길동\n"
        "\n"
        "===== 7. 맥락을 부여하라 =====\n"
        "Bad: state = 서울\n"
        "Good: Address.state = 서울\n"
        "\n"
        "===== 8. 불필요한 맥락 제거 =====\n"
        "Bad: 해운대구\n"
        "Good: 해운대구\n"
        "\n"
        "===== 9. 기발함보다 명료함을 택하라 =====\n"
        "Bad: holyHandGrenade() → 유머러스하지만 의미 불명확\n"
        "Good: deleteItems() → 명확히 항목 삭제를 의미\n"
    )
