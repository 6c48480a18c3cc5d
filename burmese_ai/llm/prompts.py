"""Prompt template library for Burmese text tasks.

Responsibilities:
- Centralize prompt construction for every task function.
- Keep prompts deterministic for the same inputs.
- Hold the static, versioned policy keyword guide.
"""

from __future__ import annotations

from ..languages import display_name


POLICY_GUIDE_VERSION = "2024.1"

POLICY_KEYWORDS_GUIDE = """
    📖 Facebook (Meta) Community Standards – မြန်မာဘာသာ Policy Keywords Guide
    - 🔞 အကြမ်းဖက်မှုနှင့် အညံ့အကြေး: သတ်, ဓား, ပစ်, ခုတ်, ရိုက်, သွေး, ခေါင်းဖြတ်, အသတ်ခံရသူ, ညှင်းပန်း, အသေခံ
    - 👤 မတော်တဆမဟုတ်သော ကိုယ်ရေးကိုယ်တာ: လိပ်စာ, ဖုန်းနံပါတ်, မုန်းတီးစကား, လူမဆန်, ဓာတ်ပုံထုတ်မယ်
    - 🧠 မမှန်သော သတင်းအချက်အလက်: COVID ကူးပြီးပြီ, ဘေးကင်းတဲ့အချက်မရှိ, WHO, deepfake, အတု ဓာတ်ပုံ
    - 💊 ဆေးဝါးနှင့် မူးယစ်ဆိုင်ရာ: မူးယစ်ဆေး, စိတ်ဖိစီးမှုတားဆေး, ချေးရောင်း, ငွေပေးဆောင်ရင် သယ်ပေးမယ်
    - 🧠 ကိုယ့်ကိုယ်ကို ထိခိုက်စေမှု: ကိုယ့်ကိုယ်ကို သတ်ချင်, စိတ်ညစ်ရင် ဆေး, သေကြောင်းကြံ
    - 💸 လိမ်လည်မှုနှင့် ငွေကြေး: ငွေလွှဲ, QR code, Screenshot ပေး, ဆော့ဖ်ဝဲ install လုပ်
    - 🧒 လူငယ်နှင့် ကာကွယ်ရေး: ၁၃ နှစ်သား, ကလေးတော်တော်ချစ်, OnlyFans, VIP group, sexual grooming
    - ⚖️ မတရားမှုနှင့် ဥပဒေချိုးဖောက်မှု: ဗမာလူမျိုးသတ်, ရှမ်းတွေက, တပ်သားတွေ, တပ်ကွဲ
    - 🕯️ အထူးအနာဂတ်နှင့် ပဋိပက္ခ: အာဏာသိမ်းရေး, မြစ်ဆုံကို ဖျက်ချင်တယ်, ဖူလုံရေး သဘောထား
"""

_NO_MARKDOWN = "Do not use any markdown formatting like ** or ##."


class PromptLibrary:
    """Build prompt strings for supported tasks."""

    def policy_check_prompt(self, text: str) -> str:
        """Return the policy screening prompt requesting a four-field JSON object."""

        return (
            "You are an expert Burmese Facebook content policy analyzer. Your task is to "
            "analyze the user's text based on the provided Facebook Policy Keywords Guide. "
            "You must respond in a specific JSON format.\n\n"
            f"Here is the guide (version {POLICY_GUIDE_VERSION}):\n"
            f"{POLICY_KEYWORDS_GUIDE}\n"
            f'Analyze the following text: "{text}"\n\n'
            "Your response MUST be a valid JSON object with exactly these four fields.\n"
            "1. **isViolation** (boolean): Set to true if any keywords or violating contexts "
            "are found, otherwise false.\n"
            "2. **reason** (string, in Burmese): Explain WHY the text is or is not a "
            "violation. If it is a violation, mention the category of violation.\n"
            "3. **violatedKeywords** (array of strings): If 'isViolation' is true, list the "
            "EXACT Burmese words/phrases from the text that violate the policy. If false, "
            "this must be an empty array [].\n"
            "4. **revisedText** (string, in Burmese): If 'isViolation' is true, rewrite the "
            "user's text to be compliant with Facebook policy while preserving the original "
            "meaning as much as possible. If false, return the original text.\n"
        )

    def spelling_check_prompt(self, text: str) -> str:
        """Return the word-level spelling and grammar check prompt."""

        return (
            "You are an extremely meticulous Burmese spelling and grammar checker. Your "
            "single task is to analyze the following Burmese text word by word against the "
            "official Myanmar Language Commission dictionary. You must be highly sensitive "
            "and flag any word that is not 100% correct.\n\n"
            "Your response MUST be a valid JSON array of objects.\n"
            '- Each object must have two keys: "incorrect" (the exact misspelled word or '
            'phrase) and "correct" (the corrected version).\n'
            "- If a word is misspelled, provide the correct spelling.\n"
            "- If you find a grammatical error, identify the incorrect phrase and provide "
            "the correction.\n"
            "- If there are absolutely no errors, you MUST return an empty array [].\n\n"
            "Do not add any explanations, notes, or apologies. Your entire output must be "
            "only the JSON array.\n\n"
            f'Analyze this text: "{text}"'
        )

    def translate_prompt(self, text: str, from_lang: str, to_lang: str) -> str:
        """Return the translation prompt using bilingual language display names."""

        return (
            f"Translate the following text from {display_name(from_lang)} to "
            f"{display_name(to_lang)}. Provide only the translated text, without any "
            f'additional explanations or labels. Text: "{text}"'
        )

    def general_qa_prompt(self, query: str) -> str:
        """Return the general-knowledge answer prompt."""

        return (
            "Provide a detailed, multi-paragraph, helpful, general-knowledge answer in "
            "Burmese for the following query. Structure the answer with clear explanations. "
            f'{_NO_MARKDOWN} Query: "{query}"'
        )

    def health_prompt(self, query: str) -> str:
        """Return the health question prompt."""

        return (
            "Provide a detailed, multi-paragraph, helpful, general-knowledge answer in "
            "Burmese for the following health-related query. Structure the answer with clear "
            f'explanations. This is not medical advice. {_NO_MARKDOWN} Query: "{query}"'
        )

    def tech_prompt(self, topic: str) -> str:
        """Return the technology/AI explainer prompt."""

        return (
            "Provide a detailed, multi-paragraph, clear explanation in Burmese for the "
            "following technology/AI topic. Structure the answer with clear explanations. "
            f'{_NO_MARKDOWN} Topic: "{topic}"'
        )

    def dictionary_prompt(self, word: str) -> str:
        """Return the dictionary-definition prompt."""

        return (
            "Provide a detailed, multi-paragraph, dictionary-style definition in Burmese for "
            f'the word: "{word}". Include its part of speech, different meanings, and example '
            f"sentences. {_NO_MARKDOWN}"
        )

    def wiki_prompt(self, topic: str) -> str:
        """Return the encyclopedia-style topic summary prompt."""

        return (
            "Provide a detailed, multi-paragraph, Wikipedia-style summary in Burmese for the "
            f'topic: "{topic}". The summary must be neutral, informative, and well-structured. '
            f"{_NO_MARKDOWN}"
        )
