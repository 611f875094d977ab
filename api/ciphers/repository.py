"""
Vault-item SQL (raw).

Ciphers are rendered to JSON by Postgres and handed back as one text value.
Python never parses that text: `json_build_object`/`json_agg` own quoting,
escaping and nulls, so the result can be spliced into a response as-is.

`where_clause` and `order_clause` are SQL fragments written in this code
base (never user input). They refer to the cipher table as `c` and bind
values through positional placeholders ($1, $2, ...) supplied in `params`.
"""

from __future__ import annotations

from typing import Any, Sequence

from core import db, errors
from core.raw_json import EMPTY_ARRAY, RawJson

_ISO_UTC = "'YYYY-MM-DD\"T\"HH24:MI:SS.MS\"Z\"'"

# One lateral aggregate per query; attachments never cost a query per cipher.
_ATTACHMENTS_JOIN = """
        LEFT JOIN LATERAL (
          SELECT COALESCE(
            jsonb_agg(
              jsonb_build_object(
                'id', a.id::text,
                'fileName', a.file_name,
                'size', a.file_size::text,
                'sizeName', pg_size_pretty(a.file_size::bigint),
                'key', a.akey,
                'object', 'attachment'
              )
              ORDER BY a.created_at, a.id
            ),
            '[]'::jsonb
          ) AS items
          FROM attachments a
          WHERE a.cipher_id = c.id
        ) att ON true
"""

_ATTACHMENTS_FIELD = """,
              'attachments', COALESCE(att.items, '[]'::jsonb)"""

_CIPHERS_SQL = f"""
        SELECT COALESCE(
          json_agg(
            COALESCE(c.data, '{{{{}}}}'::jsonb) || jsonb_build_object(
              'id', c.id::text,
              'type', c.type,
              'organizationId', c.organization_id,
              'folderId', c.folder_id,
              'favorite', COALESCE(c.favorite, false),
              'reprompt', COALESCE(c.reprompt, 0),
              'key', c.key,
              'edit', true,
              'viewPassword', true,
              'organizationUseTotp', false,
              'collectionIds', '[]'::jsonb,
              'revisionDate', to_char(c.updated_at AT TIME ZONE 'UTC', {_ISO_UTC}),
              'creationDate', to_char(c.created_at AT TIME ZONE 'UTC', {_ISO_UTC}),
              'deletedDate', to_char(c.deleted_at AT TIME ZONE 'UTC', {_ISO_UTC}),
              'object', 'cipherDetails'{{attachments_field}}
            )
            {{order_clause}}
          ),
          '[]'::json
        )::text
        FROM ciphers c
        {{attachments_join}}
        {{where_clause}}
"""


def build_cipher_json_sql(*, include_attachments: bool, where_clause: str, order_clause: str = "") -> str:
    """
    Assemble the single statement that renders matching ciphers as a JSON array.
    """
    return _CIPHERS_SQL.format(
        attachments_field=_ATTACHMENTS_FIELD if include_attachments else "",
        attachments_join=_ATTACHMENTS_JOIN if include_attachments else "",
        where_clause=where_clause,
        order_clause=order_clause,
    )


async def fetch_cipher_json_array_raw(
    include_attachments: bool,
    where_clause: str,
    params: Sequence[Any],
    order_clause: str = "",
) -> RawJson:
    """
    Return all ciphers matching `where_clause` as JSON array text.

    No matching rows yields exactly `[]`.
    """
    sql = build_cipher_json_sql(
        include_attachments=include_attachments,
        where_clause=where_clause,
        order_clause=order_clause,
    )
    try:
        value = await db.fetch_value(sql, *params)
    except db.DatabaseError as exc:
        raise errors.Internal(f"cipher lookup failed: {exc}") from exc

    if value is None:
        return EMPTY_ARRAY
    if not isinstance(value, str):
        raise errors.Internal(f"cipher query returned {type(value).__name__}, expected text")
    return RawJson(value)
