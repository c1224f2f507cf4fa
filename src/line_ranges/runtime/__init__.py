"""Runtime services: settings, telemetry, and debug-only checks."""
