"""CI dashboard service: build email records and GitHub webhook handling."""
