import logging

logger = logging.getLogger(__name__)


def _in_range(n, *indices):
    return all(0 <= i < n for i in indices)


def swap_rows(matrix, r1=0, r2=1):
    m = matrix.copy()
    n = m.size()
    if not _in_range(n, r1, r2):
        logger.warning("Invalid row indices for swapRows. No swap performed.")
        return m
    if r1 == r2:
        return m

    for j in range(n):
        temp = m.at(r1, j)
        m.set_at(r1, j, m.at(r2, j))
        m.set_at(r2, j, temp)
    return m


def swap_columns(matrix, c1=0, c2=1):
    m = matrix.copy()
    n = m.size()
    if not _in_range(n, c1, c2):
        logger.warning("Invalid column indices for swapColumns. No swap performed.")
        return m
    if c1 == c2:
        return m

    for i in range(n):
        temp = m.at(i, c1)
        m.set_at(i, c1, m.at(i, c2))
        m.set_at(i, c2, temp)
    return m


def update_element(matrix, row=0, col=0, value=100):
    m = matrix.copy()
    if not _in_range(m.size(), row, col):
        logger.warning("Invalid indices for updateElement. No update performed.")
        return m
    m.set_at(row, col, value)
    return m
