"""API endpoint modules; thin routes delegating to application use cases."""
