"""Application layer: conversation memory, prompt assembly and service orchestration."""
