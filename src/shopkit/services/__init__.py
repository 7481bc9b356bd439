"""Service layer: rule envelopes and collaborator orchestration."""
