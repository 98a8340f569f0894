"""Namespace reserved for API documentation tooling; it holds no modules yet."""