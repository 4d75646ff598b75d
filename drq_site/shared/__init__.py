"""Cross-cutting helpers: telemetry, tracking sinks, generators, time."""
