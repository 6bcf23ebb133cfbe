"""
Module description:

"""

__version__ = '0.1.0'

import pandas as pd

DEFAULT_COLUMNS = ['userId', 'itemId', 'rating', 'timestamp']
DEFAULT_DTYPES = ['int64', 'int64', 'float64', 'int64']


def read_tabular(filename, cols=None, datatypes=None, sep='\t', header=False):
    """
    Args:
        filename (str): tabular file path
        cols (list): column names, `userId itemId rating timestamp` by default
        datatypes (list): column dtypes, aligned with `cols`
        sep (str): column separator
        header (bool): whether the first row holds the column names
    Return:
         A pandas dataframe. Columns are named by position; names beyond the file's
         column count are left out, as are file columns beyond `cols`.
    """
    cols = DEFAULT_COLUMNS if cols is None else cols
    datatypes = DEFAULT_DTYPES[:len(cols)] if datatypes is None else datatypes

    df = pd.read_csv(filename, sep=sep, header=0 if header else None, index_col=False)
    df = df.iloc[:, :len(cols)]
    df.columns = cols[:df.shape[1]]
    dtypes = {c: t for c, t in zip(cols, datatypes) if c in df.columns}
    return df.astype(dtypes)
