from slopeone.vectors.sparse_vector import SparseVector, MutableSparseVector
