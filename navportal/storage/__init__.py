"""Document storage for the link directory.

Data layout (one JSON document per store key):
  site_config    {title, subtitle, backgroundImages: [data URL, ...]}
  categories     [Category, ...] with nested subcategories and links

Both documents are created with defaults on first read. Every mutation is a
whole-document read-modify-write with no locking; the last write wins.

Role-gated writes take the caller's token and return an Outcome; store
failures raise UpstreamError.
"""

# Re-export all public symbols so `from navportal import storage` keeps working.

from .core import (  # noqa: F401
    CATEGORIES_KEY,
    CONFIG_KEY,
    FileStore,
    KVStore,
    MemoryStore,
    get_store,
    init_storage,
)

from .categories import (  # noqa: F401
    default_categories,
    filter_for_role,
    get_tree,
    new_category,
    new_id,
    new_link,
    new_subcategory,
    replace_tree,
)

from .config import (  # noqa: F401
    background_url,
    get_config,
    load_site_config,
    save_site_config,
    update_config,
)

from .backgrounds import (  # noqa: F401
    append_background,
    decode_data_url,
    delete_background,
    encode_data_url,
    fetch_background,
)
