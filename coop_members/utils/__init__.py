"""공통 유틸리티 패키지 — Shared utilities (errors, pagination, documents)."""
