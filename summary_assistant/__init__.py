from .config import SummaryLength, SummaryOptions, SummarizerConfig, SuggestionConfig
from .datatypes import Sentence, ScoredSentence, Readability, SuggestionReport, SummaryResult, FrequencyTable
from .preprocessing import STOPWORDS, tokenize, split_sentences
from .features import word_freq, top_keywords
from .scoring import score_sentences
from .readability import readability, count_syllables
from .suggestions import improvement_suggestions, count_passive_voice, count_heading_lines, count_bullet_lines
from .formatting import format_summary
from .loaders import ExtractionError, load_text, load_text_from_file
from .summarize import summarize, choose_sentence_count, select_top_sentences
