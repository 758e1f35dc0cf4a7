"""Smart Match 추천 이유 프롬프트와 표시용 문자열"""

SYSTEM_PROMPT = (
    "Jesteś ekspertem od filmów, który tworzy BARDZO KRÓTKIE (1-2 zdania), "
    "naturalne uzasadnienia dlaczego konkretny film pasuje do wyborów "
    "użytkownika, uwzględniając preferencje popularności."
)

USER_PROMPT_TEMPLATE = """Jesteś ekspertem od filmów, który tłumaczy użytkownikom dlaczego konkretny film idealnie pasuje do ich wyborów w formularzu. Napisz BARDZO KRÓTKIE uzasadnienie (MAX 1-2 zdania) dlaczego "{title}" to dobry wybór.

WYBORY UŻYTKOWNIKA W FORMULARZU:
{user_choices}

INFORMACJE O FILMIE:
{movie_context}

ZADANIE: Napisz BARDZO KRÓTKIE uzasadnienie (MAKSYMALNIE 1-2 zdania) dlaczego ten film pasuje do wyborów użytkownika, uwzględniając szczególnie preferencje popularności.

WAŻNE ZASADY:
1. MAKSYMALNIE 1-2 zdania - to MUSI BYĆ KRÓTKIE!
2. Pisz naturalnie i płynnie, ale zwięźle
3. Skup się na NAJWAŻNIEJSZYM argumencie
4. Uwzględnij preferencje popularności jeśli określone
5. Oceny opisuj jako "ocena widzów" z "aż" dla dobrych ocen
6. Gatunki opisuj naturalnie

Napisz KRÓTKIE uzasadnienie (MAX 2 zdania) dla "{title}":
"""

# 프롬프트용 선호도 표시 문자열
MOOD_DESCRIPTIONS = {
    "inspiration": "inspiracji",
    "adrenaline": "adrenaliny",
    "emotions": "głębokich emocji",
    "humor": "humoru",
    "ambitious": "intelektualnego wyzwania",
    "romance": "romantycznego nastroju",
}

DECADE_DESCRIPTIONS = {
    "2000s": "lata 2000-2009",
    "2010s": "lata 2010-2019",
    "both": "obie dekady (2000-2019)",
}

POPULARITY_DESCRIPTIONS = {
    "blockbuster": "bardzo znane filmy (najpopularniejsze)",
    "classic": "popularne klasyki (średnia popularność)",
    "hidden-gem": "mniej znane perełki (niszowe)",
    "any": "dowolna popularność",
}

TIME_DESCRIPTIONS = {
    "short": "szybką sesję (60-90 minut)",
    "normal": "standardowy seans (90-150 minut)",
    "long": "długi wieczór (150+ minut)",
    "any": "dowolny czas",
}

# fallback 문구
POPULARITY_SUFFIXES = {
    "blockbuster": " - jeden z najpopularniejszych oscarowych hitów",
    "hidden-gem": " - mniej znana, ale wysoko ceniona perełka",
    "classic": " - uznany klasyk o średniej popularności",
}

DECADE_PHRASES = {
    "2000s": "z lat 2000-2009",
    "2010s": "z lat 2010-2019",
}

# 영화 vote_count → 인기도 라벨 (절대값 기준)
VERY_HIGH_VOTES = 100_000
LOW_VOTES = 20_000
