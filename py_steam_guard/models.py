class GuardCode:
    CHARSET = '23456789BCDFGHJKMNPQRTVWXY'
    LENGTH = 5
    PERIOD = 30
    MASK = 0x7fffffff
    U32_MASK = 0xFFffFFff
