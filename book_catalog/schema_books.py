import graphene
from book_catalog import base
from book_catalog.book_model import BookFormat

Format = graphene.Enum.from_enum(BookFormat, name='Format', description="Format a book is published in.")


class Book(graphene.ObjectType):
    """Book node."""
    id = graphene.Int(required=True, description="Id of the book.")
    title = graphene.String(required=True, description="Title of the book.")
    author = graphene.String(required=True, description="Author of the book.")
    format = graphene.Field(Format, required=True, description="Format of the book.")


class BookQuery:
    """Queries over the book data source."""

    books = graphene.List(graphene.NonNull(Book), required=True, description="All books.")
    book_by_id = graphene.List(
        graphene.NonNull(Book),
        required=True,
        book_id=graphene.Argument(graphene.Int, required=True, name='bookID'),
        description="Books with the given id.")
    book_by_name = graphene.Field(
        Book,
        required=True,
        book_name=graphene.String(required=True),
        description="Book with the given title, an error when no title matches.")
    book_by_format = graphene.List(
        graphene.NonNull(Book),
        required=True,
        book_format=graphene.Argument(Format, required=True),
        description="Books in the given format.")

    def resolve_books(root, info):
        return base.all_books()

    def resolve_book_by_id(root, info, book_id):
        return base.find_books_by_id(book_id)

    def resolve_book_by_name(root, info, book_name):
        return base.find_book_by_title(book_name)

    def resolve_book_by_format(root, info, book_format):
        return base.find_books_by_format(book_format)
