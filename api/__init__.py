"""REST API for the video composer."""
