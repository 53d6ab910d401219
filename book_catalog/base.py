from book_catalog.book_model import BookFormat, BookModel

# Mock data source, fixed for the life of the process
books = (
    BookModel(id=1, title='The Awakening', author='Kate Chopin', format=BookFormat.AUDIOBOOK),
    BookModel(id=2, title='City of Glass', author='Paul Auster', format=BookFormat.HARDCOVER),
    BookModel(id=3, title='The Eagle Has Landed', author='Jack Higgins', format=BookFormat.PAPERBACK),
)


def all_books():
    """Return every book in data source order."""
    return list(books)


def find_books_by_id(book_id):
    """Return every book whose id matches, usually zero or one."""
    return [book for book in books if book.id == book_id]


def find_book_by_title(title):
    """Return the first book with the given title, or None."""
    return next((book for book in books if book.title == title), None)


def find_books_by_format(book_format):
    return [book for book in books if book.format == book_format]
