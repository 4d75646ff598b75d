"""Infrastructure: cache, static catalog, repositories."""
