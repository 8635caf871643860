"""Constants."""

# Size of the transfer buffer in bytes.
BUFFER_SIZE = 4096

# Permission bits of newly created destination files (before umask).
DESTINATION_MODE = 0o644

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

OVERWRITE_PROMPT = "Destination file '{destination}' already exists. Copying will overwrite it. Continue? (y/n): "
INVALID_ANSWER_PROMPT = "Invalid input. Please enter 'y' or 'n': "
PROCEED_MESSAGE = "Proceeding with copy..."
CANCEL_MESSAGE = "Copy cancelled by user."
SUCCESS_MESSAGE = "Success! Copied '{source}' to '{destination}'"
