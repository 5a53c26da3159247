from __future__ import annotations
import re
from typing import List
from .datatypes import Sentence


RE_NON_WORD   = re.compile(r"[^a-z0-9\s\-']")     # anything a token can't contain
RE_TOKEN      = re.compile(r"^[a-z0-9][a-z0-9\-']*$")
RE_WHITESPACE = re.compile(r"\s+")
# . ! ? then whitespace, only when the next sentence starts with a capital or digit
RE_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9])")

STOPWORDS = frozenset((
    "a,about,above,after,again,against,all,am,an,and,any,are,aren't,as,at,be,"
    "because,been,before,being,below,between,both,but,by,could,couldn't,did,didn't,do,does,doesn't,doing,don't,"
    "down,during,each,few,for,from,further,had,hadn't,has,hasn't,have,haven't,having,he,he'd,he'll,he's,her,"
    "here,here's,hers,herself,him,himself,his,how,how's,i,i'd,i'll,i'm,i've,if,in,into,is,isn't,it,it's,its,"
    "itself,let's,me,more,most,mustn't,my,myself,no,nor,not,of,off,on,once,only,or,other,ought,our,ours,ourselves,"
    "out,over,own,same,shan't,she,she'd,she'll,she's,should,shouldn't,so,some,such,than,that,that's,the,their,"
    "theirs,them,themselves,then,there,there's,these,they,they'd,they'll,they're,they've,this,those,through,to,"
    "too,under,until,up,very,was,wasn't,we,we'd,we'll,we're,we've,were,weren't,what,what's,when,when's,where,"
    "where's,which,while,who,who's,whom,why,why's,with,won't,would,wouldn't,you,you'd,you'll,you're,you've,"
    "your,yours,yourself,yourselves"
).split(","))


def is_valid_token(tok: str) -> bool:
    return bool(RE_TOKEN.match(tok))

def normalize_whitespace(text: str) -> str:
    return RE_WHITESPACE.sub(" ", text).strip()

def tokenize(text: str) -> List[str]:
    """Lowercase word tokens; punctuation is dropped, hyphens and apostrophes kept.

    Leftover fragments that don't start with a letter or digit (a lone "-",
    a quoted "'nice'") are discarded, so they count neither as words for
    readability nor toward a sentence's length when scoring. A plain
    whitespace split would keep them: "Cats - dogs are 'nice'." is 3 tokens
    here, not 5.
    """
    cleaned = RE_NON_WORD.sub(" ", text.lower())
    return [t for t in cleaned.split() if is_valid_token(t)]

def split_sentences(text: str) -> List[Sentence]:
    # Heuristic: "Dr. Smith" or "3. Next" still split; lowercase continuations don't.
    raw = normalize_whitespace(text)
    if not raw:
        return []
    parts = [p.strip() for p in RE_SENTENCE_BOUNDARY.split(raw)]
    parts = [p for p in parts if p]
    return [Sentence(index=i, text=p) for i, p in enumerate(parts)]
