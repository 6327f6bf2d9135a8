"""Custom field lookups.

``like`` passes the right-hand side to SQL ``LIKE`` untouched.  Django's
``contains`` escapes ``%`` and ``_`` and, on MySQL, compares with
``LIKE BINARY``; catalog search instead leaves wildcards and case
sensitivity to the database pattern syntax and collation.

Usage::

    Product.objects.filter(name__like=f"%{keyword}%")
"""

from __future__ import annotations

from django.db.models import CharField, Lookup, TextField


@CharField.register_lookup
@TextField.register_lookup
class Like(Lookup):
    lookup_name = "like"

    def as_sql(self, compiler, connection):
        lhs, lhs_params = self.process_lhs(compiler, connection)
        rhs, rhs_params = self.process_rhs(compiler, connection)
        return f"{lhs} LIKE {rhs}", [*lhs_params, *rhs_params]
