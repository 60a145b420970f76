"""Service layer — factory selection, issuance orchestration, ServiceResult façade."""
