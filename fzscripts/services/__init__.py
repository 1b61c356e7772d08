"""Business logic: credential store, sessions, auth, scripts and bootstrap seeding."""
