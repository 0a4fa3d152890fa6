"""
목적:
- Figma Capture 계층의 예외 타입을 표준화한다.

설명:
- 훅 파이프라인은 대부분의 실패를 경고로 처리하는 소프트 실패 모델을 따른다.
- 예외는 설정 오류, 스냅샷 저장 실패, 컴포넌트 연결 실패처럼
  호출자가 처리 전략을 선택해야 하는 경우에만 사용한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/figma_capture/storage/snapshot_store.py
- src_py/figma_capture/hooks/pipeline.py
"""


class FigmaCaptureError(Exception):
    """Figma Capture 공통 베이스 예외."""


class ConfigurationError(FigmaCaptureError):
    """설정값이 유효하지 않을 때 발생한다."""


class SnapshotPersistenceError(FigmaCaptureError):
    """스냅샷 파일 쓰기/읽기가 파일시스템에서 거부되었을 때 발생한다."""


class ComponentLinkError(FigmaCaptureError):
    """컴포넌트 이름을 노드 메타데이터에 연결할 수 없을 때 발생한다."""
