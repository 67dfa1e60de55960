"""Let's Make a Deal: a stateful Monty Hall game service."""
