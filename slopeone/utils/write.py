"""
Module description:

"""

__version__ = '0.1.0'

import os

from slopeone.utils.folder import create_folder


def store_predictions(predictions, path=""):
    """
    Store predicted scores, one `user item score` row per prediction
    :param predictions: mapping user -> SparseVector of scores
    :param path: destination file
    :return:
    """
    folder = os.path.dirname(os.path.abspath(path))
    create_folder(folder, exist_ok=True)

    with open(path, 'w') as out:
        for u, preds in sorted(predictions.items()):
            for i, value in preds.items():
                out.write(str(u) + '\t' + str(i) + '\t' + str(value) + '\n')
