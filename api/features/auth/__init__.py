"""Auth feature package: registration and login backed by scrypt password hashes."""
