"""조합원 관리 백엔드 — Cooperated membership backend."""
