from enum import Flag, auto


class Debug(Flag):
    DUMP_AST = auto()
    NO_INTERPRET = auto()
    REDUCED_ERROR_REPORTING = auto()
    BACKTRACE = auto()
