# -*- coding: utf-8 -*-
from bytesize.byte_size import ByteSize

__all__ = ['ByteSize']
