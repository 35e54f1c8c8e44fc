"""Exception types raised by the heapbatch package."""


class HeapBatchError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class EmptyHeapError(HeapBatchError, IndexError):
    """Raised by ``Heap.remove`` when the heap holds no elements."""


class InvalidIndexError(HeapBatchError, AssertionError):
    """An internal swap touched a position outside the backing storage.

    This signals a defect in the restoration algorithm, never a user error.
    """


class TemplateError(HeapBatchError, ValueError):
    pass


class InvalidTemplateError(TemplateError):
    pass


class InvalidTemplateKeyError(TemplateError):
    pass


class MissingTemplateKeyError(TemplateError, KeyError):
    pass
