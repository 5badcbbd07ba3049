"""
Iterator.

El iterador recorre los libros de una estanteria sin exponer como se
guardan. La secuencia es perezosa, finita y solo hacia delante: para
volver a empezar se crea un iterador nuevo.

next() solo es valido mientras has_next() sea True; si no, lanza
IteratorExhaustedError. Ademas, BookShelf y BookIterator cumplen el
protocolo de iteracion de Python, asi que funcionan en un for.
"""

from typing import List

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class IteratorExhaustedError(Exception):
    """Se llamo a next() sin elementos pendientes."""


class BookIterator:
    def __init__(self, books: List[str]):
        self._books = books
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._books)

    def next(self) -> str:
        """
        Devuelve el siguiente libro.

        Raises:
            IteratorExhaustedError: Si ya no quedan libros
        """
        if not self.has_next():
            raise IteratorExhaustedError(
                f"Iterador agotado tras {self._position} elementos"
            )
        book = self._books[self._position]
        self._position += 1
        return book

    def __iter__(self) -> 'BookIterator':
        return self

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        return self.next()


class BookShelf:
    """Coleccion: su almacenamiento interno no se expone."""

    def __init__(self):
        self._books: List[str] = []

    def add(self, title: str) -> None:
        self._books.append(title)

    def create_iterator(self) -> BookIterator:
        # Copia: el iterador no ve cambios posteriores de la estanteria
        return BookIterator(list(self._books))

    def __iter__(self) -> BookIterator:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._books)


@scenario(
    "iterator",
    PatternGroup.BEHAVIORAL,
    "Recorre una coleccion sin exponer su representacion interna"
)
def run(out: ScenarioOutput) -> None:
    shelf = BookShelf()
    for title in ("Don Quijote", "Rayuela", "Ficciones"):
        shelf.add(title)

    iterator = shelf.create_iterator()
    while iterator.has_next():
        out.write(f"Libro: {iterator.next()}")

    try:
        iterator.next()
    except IteratorExhaustedError as e:
        out.write(f"Error: {e}")

    out.write("Nuevo recorrido: " + ", ".join(shelf))
