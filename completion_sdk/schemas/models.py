from enum import Enum


class Model(str, Enum):
    """Model identifiers accepted by the API, valued by their wire name."""

    TEXT_DAVINCI_003 = "text-davinci-003"
    TEXT_DAVINCI_002 = "text-davinci-002"
    TEXT_CURIE_001 = "text-curie-001"
    TEXT_BABBAGE_001 = "text-babbage-001"
    TEXT_ADA_001 = "text-ada-001"
    DAVINCI = "davinci"
    CURIE = "curie"
    BABBAGE = "babbage"
    ADA = "ada"
    GPT_35_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"

    TEXT_SIMILARITY_ADA_001 = "text-similarity-ada-001"
    TEXT_SIMILARITY_BABBAGE_001 = "text-similarity-babbage-001"
    TEXT_SIMILARITY_CURIE_001 = "text-similarity-curie-001"
    TEXT_SIMILARITY_DAVINCI_001 = "text-similarity-davinci-001"
    TEXT_SEARCH_ADA_DOC_001 = "text-search-ada-doc-001"
    TEXT_SEARCH_ADA_QUERY_001 = "text-search-ada-query-001"
    TEXT_SEARCH_BABBAGE_DOC_001 = "text-search-babbage-doc-001"
    TEXT_SEARCH_BABBAGE_QUERY_001 = "text-search-babbage-query-001"
    TEXT_SEARCH_CURIE_DOC_001 = "text-search-curie-doc-001"
    TEXT_SEARCH_CURIE_QUERY_001 = "text-search-curie-query-001"
    TEXT_SEARCH_DAVINCI_DOC_001 = "text-search-davinci-doc-001"
    TEXT_SEARCH_DAVINCI_QUERY_001 = "text-search-davinci-query-001"
    CODE_SEARCH_ADA_CODE_001 = "code-search-ada-code-001"
    CODE_SEARCH_ADA_TEXT_001 = "code-search-ada-text-001"
    CODE_SEARCH_BABBAGE_CODE_001 = "code-search-babbage-code-001"
    CODE_SEARCH_BABBAGE_TEXT_001 = "code-search-babbage-text-001"

    def to_name(self) -> str:
        return self.value


DEFAULT_MODEL = Model.TEXT_SIMILARITY_DAVINCI_001
