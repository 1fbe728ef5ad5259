"""
목적: 설정 로더 공개 API를 제공한다.
설명: 일반 설정 병합 로더와 런타임 환경 로더를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/data_access/shared/config/loader.py, src/data_access/shared/config/runtime_env_loader.py
"""

from data_access.shared.config.loader import ConfigLoader
from data_access.shared.config.runtime_env_loader import RuntimeEnvironmentLoader

__all__ = ["ConfigLoader", "RuntimeEnvironmentLoader"]
