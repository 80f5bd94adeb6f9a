"""HTTP API for DevToolbox."""
