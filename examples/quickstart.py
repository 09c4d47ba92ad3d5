"""Quickstart example for tikengine.

Parses a TIK, prints its tokens and translates it into an ICU message
skeleton, with and without modifiers.

CORE ONLY: Examples 1-4 work without Babel. Example 5 needs:
    pip install tikengine[babel]
"""

from tikengine import Config, ICUModifier, ICUTranslator, Parser, TikSyntaxError
from tikengine.core import is_babel_available

# Example 1: Tokens
print("=" * 50)
print("Example 1: Tokens")
print("=" * 50)

source = '{"John"} has {# messages} with a similar {"status"}.'
parser = Parser()
tik = parser.parse(source)

print("TOKENS:", len(tik))
for token in tik:
    print(f"{token.start}-{token.end}: {tik.text(token)!r} ({token.type})")

# Example 2: ICU skeleton
print("\n" + "=" * 50)
print("Example 2: ICU Message")
print("=" * 50)

translator = ICUTranslator()
print(translator.translate(tik))
# Output: {arg0} has {arg1, plural, other {# messages}} with a similar {arg2}.

# Example 3: Modifiers
print("\n" + "=" * 50)
print("Example 3: Gender and Plural Modifiers")
print("=" * 50)

print(translator.translate(tik, {
    0: ICUModifier(gender=True),  # John
    2: ICUModifier(plural=True),  # "status"
}))
# Output: {arg0_gender, select, other {{arg0}}} has {arg1, plural, other {# messages}}
#         with a similar {arg2_plural, plural, other {{arg2}}}.

# Example 4: Errors and custom vocabulary
print("\n" + "=" * 50)
print("Example 4: Errors and Custom Vocabulary")
print("=" * 50)

try:
    parser.parse("You have {# {integer} messages}")
except TikSyntaxError as e:
    print(e.format_with_context())

german = Config.with_constants(text="Text", integer="Ganzzahl", cardinal_plural_start="Mehrzahl")
print(ICUTranslator(german).translate(Parser(german).parse("{Text} hat {Mehrzahl Nachrichten}")))
# Output: {arg0} hat {arg1, plural, other {# Nachrichten}}

# Example 5: Plural arms for a target locale
if is_babel_available():
    from tikengine.icu import required_plural_arms

    print("\n" + "=" * 50)
    print("Example 5: Required Plural Arms (Polish)")
    print("=" * 50)
    print(required_plural_arms(tik, "pl"))
    # Output: {'arg1': ('one', 'few', 'many', 'other')}
