"""Core domain logic: exceptions, memory primitives and prompt templates."""
