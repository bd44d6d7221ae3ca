"""
Common constants used across the sortable table package.
"""

# Query string keys used when encoding an order state into a URL
ORDER_BY_PARAM = 'order_by'
ORDER_DIRECTIONS_PARAM = 'order_directions'

# Attribute names emitted on event-mode sort links
EVENT_CLICK_ATTR = 'data-click'
EVENT_VALUE_ATTR = 'data-value-order'
EVENT_TARGET_ATTR = 'data-target'

# Option keys accepted by the table renderer, in the order they are documented
TABLE_OPTION_KEYS = (
    'container',
    'container_attrs',
    'no_results_content',
    'symbol_asc',
    'symbol_attrs',
    'symbol_desc',
    'table_attrs',
    'tbody_td_attrs',
    'tbody_tr_attrs',
    'th_wrapper_attrs',
    'thead_th_attrs',
    'thead_tr_attrs',
)

# Environment variable holding JSON global table options
TABLE_OPTS_ENV = 'TABLE_OPTS'

# Flask config key for app-owned global table options
TABLE_OPTS_CONFIG_KEY = 'TABLE_OPTS'
