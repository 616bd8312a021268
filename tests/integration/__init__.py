"""End-to-end pipeline and CLI tests against the mocked gem."""
