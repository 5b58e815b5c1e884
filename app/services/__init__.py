# Services package.
#
# Each module exposes a focused set of async functions that encapsulate
# database access for a single entity:
#
#   link_service     — feed listing, lookup and creation for Link
#   comment_service  — lookup, per-link listing and creation for Comment
#
# All service functions accept an AsyncSession as their first argument so
# that the resolver layer owns the unit of work (one session per field,
# committed by ``GraphQLContext.session``).
