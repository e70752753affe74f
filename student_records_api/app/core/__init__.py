"""Settings, logging and error plumbing shared by the whole app."""
