"""Core domain logic: chunking, credentials and the exception hierarchy."""
