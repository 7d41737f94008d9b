"""Account registration and lookup; users own fashion records."""
