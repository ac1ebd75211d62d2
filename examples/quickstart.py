"""Quickstart example for ftldatetime.

Demonstrates DATETIME() style options, the default style, error fallbacks
and strict mode.

WARNING: Examples use use_isolating=False for cleaner terminal output.
NEVER disable bidi isolation in production applications that support RTL languages.

Note: Examples ignore the 'errors' return value where nothing can fail. In
production, always check errors and log/report translation issues.
"""

from datetime import datetime

from ftldatetime import DateTimeBundle, FluentDateTime, OptionsMergeError

moment = FluentDateTime.from_datetime(datetime(1989, 11, 9, 23, 30))

# Example 1: Date styles
print("=" * 50)
print("Example 1: Date Styles (en-US)")
print("=" * 50)

bundle = DateTimeBundle("en-US", use_isolating=False)
for style in ("full", "long", "medium", "short"):
    result, _ = bundle.format_call("DATETIME", [moment], {"dateStyle": style})
    print(f"{style:>6}: {result}")
# Output:
#   full: Thursday, November 9, 1989
#   long: November 9, 1989
# medium: Nov 9, 1989
#  short: 11/9/89

# Example 2: Date and time together
print("\n" + "=" * 50)
print("Example 2: Date and Time (fr-FR)")
print("=" * 50)

bundle_fr = DateTimeBundle("fr-FR", use_isolating=False)
result, _ = bundle_fr.format_call(
    "DATETIME", [moment], {"dateStyle": "full", "timeStyle": "short"}
)
print(result)

# Example 3: No options means a short date
print("\n" + "=" * 50)
print("Example 3: Default Style")
print("=" * 50)

result, _ = bundle.format_value(moment)
print(result)
# Output: 11/9/89

# Example 4: Zone display uses the system time zone
print("\n" + "=" * 50)
print("Example 4: Time Zone Display")
print("=" * 50)

result, _ = bundle.format_call("DATETIME", [moment], {"timeStyle": "full"})
print(result)

# Example 5: Bad options fall back instead of raising
print("\n" + "=" * 50)
print("Example 5: Error Fallback")
print("=" * 50)

result, errors = bundle.format_call("DATETIME", [moment], {"dateStyle": "enormous"})
print(result)
# Output: {!DATETIME}
for error in errors:
    print(error)

# Example 6: Strict mode raises
print("\n" + "=" * 50)
print("Example 6: Strict Mode")
print("=" * 50)

strict_bundle = DateTimeBundle("en-US", strict=True)
try:
    strict_bundle.format_call("DATETIME", [moment], {"timeStyle": 5})
except OptionsMergeError as e:
    print(f"Rejected option {e.option_name}={e.option_value!r}")
# Output: Rejected option timeStyle=5
