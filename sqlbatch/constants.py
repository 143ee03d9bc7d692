"""Constants for sqlbatch - default dialect settings."""

# Batch separator recognized by sqlcmd, osql and SSMS. It is not part of T-SQL.
DEFAULT_SEPARATOR = "go"
# Keywords sharing the separator's prefix. These are tried first.
DEFAULT_LOOK_ALIKES = ("goto",)

SINGLE_LINE_COMMENT = "--"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"

# Double quotes delimit strings when QUOTED_IDENTIFIER is OFF.
QUOTE_CHARS = ("'", '"')

DEFAULT_MULTIPLIER = 1
SEPARATOR_NOT_FOUND = 0

# Placeholders: {count} (repeat count), {batch} (batch body)
REPEAT_TEMPLATE = """
DECLARE @counter INT = 0;
WHILE @counter < {count}
BEGIN
  {batch}
  SET @counter = @counter + 1;
END;
"""
