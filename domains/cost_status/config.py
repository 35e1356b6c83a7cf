"""Cost status domain configuration."""

SLACK_PROFILE_URL = "https://slack.com/api/users.profile.set"

# Emoji staircase: (exclusive upper bound in USD, emoji). Anything above the last
# bound gets OVERFLOW_EMOJI.
INDICATOR_BREAKPOINTS = [
    (50, ":claude-0:"),
    (100, ":claude-50:"),
    (150, ":claude-100:"),
    (200, ":claude-150:"),
    (250, ":claude-200:"),
    (300, ":claude-250:"),
    (350, ":claude-300:"),
    (400, ":claude-350:"),
    (450, ":claude-400:"),
    (500, ":claude-450:"),
    (1000, ":claude-500:"),
]
OVERFLOW_EMOJI = ":claude-rainbow:"  # $1000+

# Savings above this get compared against a purchasable item
COMPARISON_MIN = 12
# Savings above this (but not above COMPARISON_MIN) are "all you can eat"
STEADY_STATE_MIN = 0

# (price in USD, item). Order here does not matter, the catalog sorts it.
DEFAULT_COMPARISONS = [
    (4, "GitHub Team 1ヶ月分"),
    (8.75, "Slack Pro 1ヶ月分"),
    (10, "GitHub Copilot Individual 1ヶ月分"),
    (14, "Linear Team 1ヶ月分"),
    (16, "Figma Personal 1ヶ月分"),
    (20, "ChatGPT Plus 1ヶ月分"),
    (20, "Vercel Pro 1ヶ月分"),
    (40, "技術書1冊分"),
    (63.62, "JetBrains全製品 1ヶ月分"),
    (69.99, "Adobe Creative Cloud 1ヶ月分"),
    (75, "Samsung 980 PRO 1TB"),
    (90, "USB-C ハブ Anker 高性能版"),
    (99, "Magic Mouse"),
    (130, "Samsung 980 PRO 2TB"),
    (149, "Magic Trackpad"),
    (199, "Magic Keyboard テンキー付き"),
    (248, "Magic Mouse + Magic Trackpad"),
    (242, "Realforce R3 45g"),
    (250, "CalDigit TS3 Plus"),
    (270, "Dell UltraSharp 24inch"),
    (299, "NVIDIA RTX 4060"),
    (320, "HHKB Professional HYBRID"),
    (349, "iPad Pro 11inch 256GB"),
    (400, "CalDigit TS4 Thunderbolt 4"),
    (450, "CalDigit USB-C SOHO ドック"),
    (579, "NVIDIA RTX 4070"),
    (599, "iPad Pro 12.9inch 512GB"),
    (650, "Samsung 980 PRO 4TB"),
    (659.88, "Adobe Creative Cloud 年間分"),
    (689, "NVIDIA RTX 4070 Ti"),
    (750, "Herman Miller Sayl チェア"),
    (763.42, "JetBrains全製品 年間分"),
    (850, "LG UltraFine 5K 27inch"),
    (950, "Sony FE 24-70mm F4"),
    (999, "MacBook Air M3 8GB"),
    (999, "M2 Mac mini 16GB"),
    (1300, "Herman Miller Aeron チェア"),
    (1499, "NVIDIA RTX 4080"),
    (1599, "MacBook Air M3 16GB"),
    (1599, "Apple Studio Display"),
    (1599, "MacBook Pro 14inch M3"),
    (1999, "Mac Studio M2 Max"),
    (2000, "Sony α7 IV ボディ"),
    (2199, "Sony α7C II ボディ"),
    (2298, "Sony FE 24-70mm F2.8 GM II"),
    (2495, "Blackmagic Pocket Cinema 6K Pro"),
    (2800, "MacBook Pro 14inch M3 Pro"),
    (2829, "NVIDIA RTX 4090"),
    (3000, "iMac 24inch M3 最上位"),
    (3300, "MacBook Pro 16inch M3 Pro"),
    (4999, "Pro Display XDR"),
    (5000, "MacBook Pro 16inch M3 Max"),
    (6500, "Mac Studio M2 Ultra"),
    (6999, "Mac Pro M2 Ultra 基本構成"),
]

DEFAULT_EXCEEDS_ALL_LABEL = "もはやスタートアップのサーバー代レベル"

DEFAULT_STEADY_STATE_LABEL = "Claude Max食べ放題中"

DEFAULT_LOW_USAGE_MESSAGES = [
    "今月はまだ食べ放題に行くべきではない",
    "Claude Max食べ放題まだ余裕あり",
    "もっとClaudeに頼んでも大丈夫",
    "Claude Max使い倒し不足",
    "定額の恩恵を受けきれていない",
    "まだまだClaudeと遊べる",
    "Claude Max のポテンシャル未開拓",
]

DEFAULT_TEMPLATES = {
    "comparison": "{item}程度の節約 (合計: {total_cost}, 節約: {savings})",
    "steady_state": "{message} ({total_cost})",
    "low_usage": "{message} ({total_cost})",
}
