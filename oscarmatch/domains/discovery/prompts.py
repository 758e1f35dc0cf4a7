"""Discovery 프롬프트 템플릿"""

EXPECTATION_PROMPT = """Jesteś ekspertem od filmów, który pomaga widzom zrozumieć czego mogą się spodziewać po filmie. Napisz krótki opis (maksymalnie 2-3 zdania) tego, czego widz może się spodziewać po obejrzeniu filmu "{title}" ({year}).

Informacje o filmie:
- Tytuł: {title}
- Rok: {year}
- Gatunki: {genres}
- Opis: {overview}
- Status Oscar: {status} w kategorii Najlepszy Film ({oscar_year})
- Ocena: {rating}/10

WAŻNE ZASADY:
- NIE ujawniaj spoilerów ani szczegółów fabuły
- Skup się na rodzaju emocji i doświadczenia, które film oferuje
- Opisz klimat i nastrój filmu w lekki, zachęcający sposób
- Użyj słów opisujących uczucia: "poruszający", "ekscytujący", "zabawny", "refleksyjny", "napięty" itp.
- Napisz w sposób naturalny, jakbyś polecał film przyjacielowi

Przykład dobrej odpowiedzi: "To poruszająca opowieść o ludzkich relacjach, która łączy romantyczne momenty z głębokimi emocjami i pozostawi Cię z uśmiechem na twarzy. Spodziewaj się pięknych obrazów i niezapomnianych dialogów, które długo pozostaną w pamięci."

Napisz podobny opis dla "{title}":
"""

BRIEF_SYSTEM_PROMPT = (
    "Jesteś ekspertem od filmów, który tworzy briefy filmowe bez spoilerów. "
    "Zawsze opierasz się tylko na faktach i nie wymyślasz informacji."
)

BRIEF_PROMPT = """Napisz 5-minutowy brief przed obejrzeniem filmu "{title}" ({year}). Brief ma przygotować widza do seansu, ale BEZ SPOILERÓW!

Informacje o filmie:
- Tytuł: {title}
- Oryginalny tytuł: {original_title}
- Rok: {year}
- Gatunki: {genres}
- Podstawowy opis: {overview}
- Status Oscar: {status} (ceremonii {oscar_year})
- Ocena: {rating}/10
- Czas trwania: {runtime} minut

STRUKTURA BRIEFU (każda sekcja 2-3 zdania):

🎬 **CO CZYNI TEN FILM WYJĄTKOWYM**
- Dlaczego ten film wyróżnia się spośród innych
- Jakie elementy sprawiły, że został doceniony przez Akademię
- Unikalne cechy produkcji

🎭 **WIZJA REŻYSERA**
- Styl reżyserski i podejście do tematu
- Charakterystyczne elementy wizualne lub narracyjne
- Jak reżyser podchodzi do gatunku

👥 **KLUCZOWE ROLE**
- Główni aktorzy i ich role (BEZ spoilerów fabularnych)
- Znaczące występy, które warto docenić
- Chemię między postaciami (ogólnie)

📚 **KONTEKST HISTORYCZNY**
- Tło czasowe akcji filmu lub jego produkcji
- Ważne wydarzenia historyczne/społeczne związane z filmem
- Dlaczego film był istotny w momencie premiery

💭 **PUNKTY DYSKUSJI**
- Tematy, które film porusza (bez spoilerów)
- Na co zwrócić uwagę podczas oglądania
- Dlaczego film pozostaje aktualny

WAŻNE ZASADY:
- NIE ujawniaj żadnych szczegółów fabularnych, zwrotów akcji czy zakończeń
- Opieraj się TYLKO na faktach, nie wymyślaj informacji
- Jeśli nie masz pewnych informacji, napisz "szczegóły produkcji nie są dostępne"
- Pisz entuzjastycznie ale rzeczowo
- Maksymalnie 300 słów
- Każda sekcja powinna mieć wyraźny nagłówek

Rozpocznij od: "🎬 **CO CZYNI TEN FILM WYJĄTKOWYM**\""""

EXPLANATION_PROMPT = """Wytłumacz dlaczego AI wybrało film "{title}" dla użytkownika. Napisz w stylu analizy AI - konkretnie i rzeczowo.

Informacje o filmie:
- Tytuł: {title}
- Rok: {year}
- Gatunki: {genres}
- Status Oscar: {status} ({oscar_year})
- Ocena: {rating}/10
- Długość: {runtime} min
{user_choices}
Napisz 4-5 konkretnych punktów dlaczego AI wybrało ten film, używając formatu:
"✓ [Czynnik] - [wyjaśnienie]"

Skup się na: gatunku, długości, ocenach, dostępności, statusie oscarowym."""

INSIGHT_SYSTEM_PROMPT = (
    "Jesteś ekspertem od filmów oscarowych, który tworzy motywujące, krótkie "
    "insights dla użytkowników śledzących swój postęp w oglądaniu filmów. "
    "Zawsze jesteś pozytywny i zachęcający."
)

INSIGHT_PROMPT = """Jesteś ekspertem od filmów oscarowych, który motywuje użytkowników do kontynuowania ich kinowej podróży. Napisz krótki, zachęcający insight (2-3 zdania) dla użytkownika na podstawie jego postępu.

POSTĘP UŻYTKOWNIKA:
- Kategoria: {category}
- Obejrzane filmy: {watched} z {total} ({percentage}%)
- Pozostało do obejrzenia: {remaining} filmów

FILMY DO OBEJRZENIA (próbka):
{movies}

ZADANIE: Napisz motywujący insight (2-3 zdania) który:
1. Docenia dotychczasowy postęp użytkownika
2. Zachęca do kontynuowania
3. Jeśli są filmy do obejrzenia, zasugeruj 1-2 konkretne tytuły z krótkimi uzasadnieniami (np. "dla lekkiej rozrywki" lub "dla mocnych emocji")
4. Używa naturalnego, przyjaznego tonu

PRZYKŁAD DOBREJ ODPOWIEDZI:
"Świetnie! Masz już za sobą 65% filmów z lat 2010-2019 - to imponujący postęp! Zostały Ci jeszcze 4 filmy do zakończenia tej dekady. Jeśli masz ochotę na coś lekkiego, polecam 'La La Land', ale jeśli wolisz mocne emocje, 'Moonlight' będzie idealny."

Napisz insight dla tego użytkownika:"""

CATEGORY_NAMES = {
    "2000s": "lata 2000-2009",
    "2010s": "lata 2010-2019",
}
