"""autoline — terminal line editor with word-boundary autocorrection."""
