"""
Module description:

"""

__version__ = '0.1.0'

import os


def build_log_folder(path_log_folder):
    if not os.path.exists(os.path.abspath(path_log_folder)):
        os.makedirs(os.path.abspath(path_log_folder))


def create_folder(path, exist_ok=True):
    os.makedirs(os.path.abspath(path), exist_ok=exist_ok)
    return os.path.abspath(path)
