"""Fixed values shared by the code generator and the runtime layout."""

WORD_SIZE = 4

TRUE_VALUE = 1
FALSE_VALUE = 0
DEFAULT_VALUE = 0

MARK_WORD_DEFAULT_VALUE = -1
MARK_WORD_SET_VALUE = 1
MARK_WORD_UNSET_VALUE = 0

UNUSED_TAG = 0

STRING_CLASS_NAME = "String"
INT_CLASS_NAME = "Int"
BOOL_CLASS_NAME = "Bool"