"""
Prompts used when the user supplies code or other context alongside the instruction.
"""

# Persona sent as the first message whenever context input is present
PROGRAMMING_ASSISTANT_SYSTEM_MESSAGE = (
    "You are an expert programming assistant. You will help with the code provided by the user."
)

# Prefix of the user message that carries the piped and/or file input
# The raw input text is appended directly after it
CODE_CONTEXT_PREFIX = "This is the code I need help with:\n"
