# Armor framing literals
HEADER_KEYWORD = "BEGIN"
FOOTER_KEYWORD = "END"
FRAME_KEYWORD = "SLATEPACK"
FRAME_DELIMITER = "."

# Frame grammar variants, in the order they are tried when parsing.
# New output uses FRAME_QUALIFIED unless configured otherwise.
FRAME_QUALIFIED = "qualified"   # BEGIN [NAME ]SLATEPACK.
FRAME_BARE = "bare"             # BEGINSLATEPACK.
FRAME_VARIANTS = (FRAME_QUALIFIED, FRAME_BARE)
DEFAULT_FRAME_VARIANT = FRAME_QUALIFIED

# Characters that are insignificant around framing tokens and inside the payload
WHITESPACE_CHARS = ">\n\r\t "
WORD_SEPARATOR = " "

# Payload formatting
WORD_LENGTH = 15  # characters per group before a separator is inserted

# Base58Check
CHECKSUM_SIZE = 4
