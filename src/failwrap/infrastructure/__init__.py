"""Runtime frame capture, error extraction and logging helpers."""
