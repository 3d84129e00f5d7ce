"""
Константы генератора битемпоральной схемы PostgreSQL.
"""

# Версия системы
VERSION = "1.0.0"

# Язык генерируемых функций
FUNCTION_LANGUAGE = "plpgsql"

# Тип идентификатора статической строки (возвращается upsert-функцией)
STATIC_ID_TYPE = "bigint"

# Служебные колонки, которые генератор создаёт сам
STATIC_ID_COLUMN = "static_id"
VERSION_ID_COLUMN = "version_id"
CREATED_AT_COLUMN = "created_at"
EFFECTIVE_AT_COLUMN = "effective_at"
UPDATED_AT_COLUMN = "updated_at"
ARRAY_ORDER_INDEX_COLUMN = "array_order_index"

RESERVED_PROPERTY_NAMES = [
    STATIC_ID_COLUMN,
    VERSION_ID_COLUMN,
    CREATED_AT_COLUMN,
    EFFECTIVE_AT_COLUMN,
    UPDATED_AT_COLUMN,
    ARRAY_ORDER_INDEX_COLUMN,
]

# Соглашение об именовании: snake_case
NAMING_PATTERN = r"^[a-z][a-z0-9_]*$"

# PostgreSQL ограничивает идентификаторы 63 байтами; оставляем место под
# суффиксы производных имён (_version_to_..., _hash, upsert_...)
MAX_NAME_LENGTH = 48

# Суффиксы имён для свойств-ссылок
REFERENCE_SUFFIX = "_id"
REFERENCE_ARRAY_SUFFIX = "_ids"

# Хэширование массивов (встроенная функция PostgreSQL sha256)
ARRAY_HASH_ALGORITHM = "sha256"
ARRAY_HASH_TYPE = "char(64)"
ARRAY_HASH_SUFFIX = "_hash"

# Суффиксы таблиц
VERSION_TABLE_SUFFIX = "_version"
POINTER_TABLE_SUFFIX = "_cvp"
MAPPING_TABLE_INFIX = "_to_"

# Префиксы генерируемых объектов
UPSERT_FUNCTION_PREFIX = "upsert_"
CURRENT_VIEW_PREFIX = "view_"
CURRENT_VIEW_SUFFIX = "_current"

# Префиксы переменных plpgsql
INPUT_PREFIX = "in_"
VARIABLE_PREFIX = "v_"

# Шаг отступа блоков логики внутри тела функции
BLOCK_INDENT = 4

# Виды генерируемых ресурсов
RESOURCE_KINDS = {
    'TABLE': 'table',
    'FUNCTION': 'function',
    'VIEW': 'view',
}

# Коды ошибок
ERROR_CODES = {
    'MISSING_ENTITIES_EXPORT': 'D000',
    'INVALID_ENTITY_TYPE': 'D001',
    'RESERVED_PROPERTY_NAME': 'D101',
    'NAMING_CONVENTION_VIOLATION': 'D201',
    'UNDECLARED_UNIQUE_PROPERTY': 'D301',
    'NO_UNIQUE_DETERMINANT': 'D401',
    'GENERATION_ERROR': 'G001',
    'SOURCE_LOADING_ERROR': 'I001',
    'UNKNOWN_ERROR': 'U001',
}

# Идентификаторы правил валидации деклараций
RULE_IDS = {
    'D1': 'Зарезервированные имена свойств',
    'D2': 'Соглашение об именовании',
    'D3': 'Уникальные свойства объявлены в properties',
    'D4': 'Сущность уникальна хотя бы по одному свойству',
}

# Конфигурационные параметры по умолчанию
DEFAULT_CONFIG = {
    'rules': {
        'D1': {
            'reserved_names': list(RESERVED_PROPERTY_NAMES),
        },
        'D2': {
            'pattern': NAMING_PATTERN,
            'max_length': MAX_NAME_LENGTH,
            'reference_suffix': REFERENCE_SUFFIX,
            'reference_array_suffix': REFERENCE_ARRAY_SUFFIX,
        },
        'D3': {},
        'D4': {},
    },
    'generator': {
        'language': FUNCTION_LANGUAGE,
        'static_id_type': STATIC_ID_TYPE,
        'indent': BLOCK_INDENT,
    },
}

# Зарезервированные ключевые слова PostgreSQL, которые нельзя использовать
# как идентификатор без кавычек
POSTGRES_RESERVED_KEYWORDS = frozenset([
    'ALL', 'ANALYSE', 'ANALYZE', 'AND', 'ANY', 'ARRAY', 'AS', 'ASC',
    'ASYMMETRIC', 'BOTH', 'CASE', 'CAST', 'CHECK', 'COLLATE', 'COLUMN',
    'CONSTRAINT', 'CREATE', 'CURRENT_CATALOG', 'CURRENT_DATE', 'CURRENT_ROLE',
    'CURRENT_TIME', 'CURRENT_TIMESTAMP', 'CURRENT_USER', 'DEFAULT',
    'DEFERRABLE', 'DESC', 'DISTINCT', 'DO', 'ELSE', 'END', 'EXCEPT', 'FALSE',
    'FETCH', 'FOR', 'FOREIGN', 'FROM', 'GRANT', 'GROUP', 'HAVING', 'IN',
    'INITIALLY', 'INTERSECT', 'INTO', 'LATERAL', 'LEADING', 'LIMIT',
    'LOCALTIME', 'LOCALTIMESTAMP', 'NOT', 'NULL', 'OFFSET', 'ON', 'ONLY',
    'OR', 'ORDER', 'PLACING', 'PRIMARY', 'REFERENCES', 'RETURNING', 'SELECT',
    'SESSION_USER', 'SOME', 'SYMMETRIC', 'TABLE', 'THEN', 'TO', 'TRAILING',
    'TRUE', 'UNION', 'UNIQUE', 'USER', 'USING', 'VARIADIC', 'WHEN', 'WHERE',
    'WINDOW', 'WITH',
])
