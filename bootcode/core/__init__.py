"""Instructions, programs and single-step execution."""
