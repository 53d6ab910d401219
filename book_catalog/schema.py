import graphene
import book_catalog.schema_books


class Query(book_catalog.schema_books.BookQuery, graphene.ObjectType):
    """Query objects for GraphQL API."""


schema = graphene.Schema(query=Query)


def print_schema():
    """Return the schema in SDL form."""
    return str(schema)
