"""
목적: MongoDB 연산자 토큰 상수를 제공한다.
설명: 쿼리/집계 스테이지/표현식/누산기/쿼리 수정자 이름을 한곳에서 관리한다.
디자인 패턴: 상수 객체
참조: src/data_access/integrations/mongo/cnd.py, src/data_access/integrations/mongo/builder.py
"""

ID = "_id"


class QueryOperator:
    """쿼리 비교/논리 연산자."""

    EQ = "$eq"
    NE = "$ne"
    GT = "$gt"
    GTE = "$gte"
    LT = "$lt"
    LTE = "$lte"
    IN = "$in"
    NIN = "$nin"
    REGEX = "$regex"
    OPTIONS = "$options"
    AND = "$and"
    OR = "$or"
    NOR = "$nor"
    NOT = "$not"
    EXISTS = "$exists"


class UpdateOperator:
    """업데이트 연산자."""

    SET = "$set"
    UNSET = "$unset"
    INC = "$inc"
    PUSH = "$push"
    PULL = "$pull"
    ADD_TO_SET = "$addToSet"


class Stage:
    """컬렉션 집계 스테이지."""

    ADD_FIELDS = "$addFields"
    BUCKET = "$bucket"
    BUCKET_AUTO = "$bucketAuto"
    COLL_STATS = "$collStats"
    COUNT = "$count"
    FACET = "$facet"
    GEO_NEAR = "$geoNear"
    GRAPH_LOOKUP = "$graphLookup"
    GROUP = "$group"
    INDEX_STATS = "$indexStats"
    LIMIT = "$limit"
    LIST_SESSIONS = "$listSessions"
    LOOKUP = "$lookup"
    MATCH = "$match"
    MERGE = "$merge"
    OUT = "$out"
    PLAN_CACHE_STATS = "$planCacheStats"
    PROJECT = "$project"
    REDACT = "$redact"
    REPLACE_ROOT = "$replaceRoot"
    REPLACE_WITH = "$replaceWith"
    SAMPLE = "$sample"
    SKIP = "$skip"
    SORT = "$sort"
    SORT_BY_COUNT = "$sortByCount"
    UNWIND = "$unwind"

    # DB 집계 스테이지
    CURRENT_OP = "$currentOp"
    LIST_LOCAL_SESSIONS = "$listLocalSessions"


class Arithmetic:
    """산술 표현식 연산자."""

    ABS = "$abs"
    ADD = "$add"
    CEIL = "$ceil"
    DIVIDE = "$divide"
    EXP = "$exp"
    FLOOR = "$floor"
    LN = "$ln"
    LOG = "$log"
    LOG10 = "$log10"
    MULTIPLY = "$multiply"
    POW = "$pow"
    ROUND = "$round"
    SQRT = "$sqrt"
    SUBTRACT = "$subtract"
    TRUNC = "$trunc"


class ArrayExpr:
    """배열 표현식 연산자."""

    ARRAY_TO_OBJECT = "$arrayToObject"
    CONCAT_ARRAYS = "$concatArrays"
    FILTER = "$filter"
    INDEX_OF_ARRAY = "$indexOfArray"
    IS_ARRAY = "$isArray"
    MAP = "$map"
    OBJECT_TO_ARRAY = "$objectToArray"
    RANGE = "$range"
    REDUCE = "$reduce"
    REVERSE_ARRAY = "$reverseArray"
    ZIP = "$zip"


class Conditional:
    """비교/조건 표현식 연산자."""

    CMP = "$cmp"
    COND = "$cond"
    IF_NULL = "$ifNull"
    SWITCH = "$switch"


class DateExpr:
    """날짜 표현식 연산자."""

    DATE_FROM_PARTS = "$dateFromParts"
    DATE_FROM_STRING = "$dateFromString"
    DATE_TO_PARTS = "$dateToParts"
    DATE_TO_STRING = "$dateToString"
    DAY_OF_MONTH = "$dayOfMonth"
    DAY_OF_WEEK = "$dayOfWeek"
    DAY_OF_YEAR = "$dayOfYear"
    HOUR = "$hour"
    ISO_DAY_OF_WEEK = "$isoDayOfWeek"
    ISO_WEEK = "$isoWeek"
    ISO_WEEK_YEAR = "$isoWeekYear"
    MILLISECOND = "$millisecond"
    MINUTE = "$minute"
    MONTH = "$month"
    SECOND = "$second"
    TO_DATE = "$toDate"
    WEEK = "$week"
    YEAR = "$year"


class SetExpr:
    """집합 표현식 연산자."""

    ALL_ELEMENTS_TRUE = "$allElementsTrue"
    ANY_ELEMENT_TRUE = "$anyElementTrue"
    SET_DIFFERENCE = "$setDifference"
    SET_EQUALS = "$setEquals"
    SET_INTERSECTION = "$setIntersection"
    SET_IS_SUBSET = "$setIsSubset"
    SET_UNION = "$setUnion"


class StringExpr:
    """문자열 표현식 연산자."""

    CONCAT = "$concat"
    INDEX_OF_BYTES = "$indexOfBytes"
    INDEX_OF_CP = "$indexOfCP"
    LTRIM = "$ltrim"
    REGEX_FIND = "$regexFind"
    REGEX_FIND_ALL = "$regexFindAll"
    REGEX_MATCH = "$regexMatch"
    RTRIM = "$rtrim"
    SPLIT = "$split"
    STR_LEN_BYTES = "$strLenBytes"
    STR_LEN_CP = "$strLenCP"
    STRCASECMP = "$strcasecmp"
    SUBSTR = "$substr"
    SUBSTR_BYTES = "$substrBytes"
    SUBSTR_CP = "$substrCP"
    TO_LOWER = "$toLower"
    TO_STRING = "$toString"
    TRIM = "$trim"
    TO_UPPER = "$toUpper"


class Trigonometry:
    """삼각 함수 표현식 연산자."""

    SIN = "$sin"
    COS = "$cos"
    TAN = "$tan"
    ASIN = "$asin"
    ACOS = "$acos"
    ATAN = "$atan"
    ATAN2 = "$atan2"
    ASINH = "$asinh"
    ACOSH = "$acosh"
    ATANH = "$atanh"
    DEGREES_TO_RADIANS = "$degreesToRadians"
    RADIANS_TO_DEGREES = "$radiansToDegrees"


class TypeExpr:
    """타입 변환 표현식 연산자."""

    CONVERT = "$convert"
    TO_BOOL = "$toBool"
    TO_DECIMAL = "$toDecimal"
    TO_DOUBLE = "$toDouble"
    TO_INT = "$toInt"
    TO_LONG = "$toLong"
    TO_OBJECT_ID = "$toObjectId"


class Accumulator:
    """`$group` 누산기."""

    AVG = "$avg"
    FIRST = "$first"
    LAST = "$last"
    MAX = "$max"
    MIN = "$min"
    PUSH = "$push"
    ADD_TO_SET = "$addToSet"
    STD_DEV_POP = "$stdDevPop"
    STD_DEV_SAMP = "$stdDevSamp"
    SUM = "$sum"


class Misc:
    """리터럴/객체/변수 표현식 연산자."""

    LITERAL = "$literal"
    MERGE_OBJECTS = "$mergeObjects"
    LET = "$let"


class QueryModifier:
    """쿼리 수정자와 정렬 토큰."""

    EXPLAIN = "$explain"
    HINT = "$hint"
    MAX_TIME_MS = "$maxTimeMS"
    ORDER_BY = "$orderby"
    QUERY = "$query"
    RETURN_KEY = "$returnKey"
    SHOW_DISK_LOC = "$showDiskLoc"
    NATURAL = "$natural"
