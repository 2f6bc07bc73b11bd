"""Cross-cutting helpers shared by all layers (context, telemetry, utils)."""
