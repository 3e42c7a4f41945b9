#!/usr/bin/env python3
"""
fsinspect core: path resolution, kind classification and assertions.
"""
