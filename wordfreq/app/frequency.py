import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

# Solo estos cuatro caracteres separan palabras; la puntuación queda pegada.
FRAGMENT = re.compile(r"[^ \t\r\n]+")

@dataclass(frozen=True)
class WordCount:
    word: str
    count: int

    def line(self) -> str:
        return f"{self.word}:{self.count}"

def tokenize(text: str) -> Iterator[str]:
    for m in FRAGMENT.finditer(text):
        w = m.group().strip().lower()
        if w:
            yield w

def count_words(words: Iterable[str]) -> Counter:
    counts: Counter = Counter()
    for w in words:
        # la clave se normaliza de nuevo: "Cat" y "cat" nunca son dos entradas
        counts[w.lower()] += 1
    return counts

def rank(counts: Counter) -> List[WordCount]:
    """Frecuencia descendente, luego palabra ascendente (orden por code point)."""
    items = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return [WordCount(word=w, count=c) for w, c in items]

def analyze(text: str) -> List[WordCount]:
    return rank(count_words(tokenize(text)))

def summarize(report: List[WordCount]) -> Tuple[int, int]:
    return sum(wc.count for wc in report), len(report)
