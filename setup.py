#!/usr/bin/env python
"""
Setup information for PyPi
"""

from setuptools import setup

setup(
    name='bytedump',
    version='1.0',
    description='Hex/ASCII dumps of bytes, streams, buffers and serial captures',
    python_requires='>=3.8',
    packages=['bytedump'],
    install_requires=['pyserial'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['dump_hex=bytedump.tool:main']},
)
