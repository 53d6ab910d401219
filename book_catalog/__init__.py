"""GraphQL query server over a fixed catalog of books."""
