"""Default separator lists used to split text into tokens."""

# Every character of the Unicode punctuation categories (Pc, Pd, Pe, Pf, Pi,
# Po, Ps) and separator categories (Zl, Zp, Zs), plus ". ", ", " and "។ល។"
# so they are treated as hard separators, and "`" for markdown text.
DEFAULT_SEPARATORS: tuple[str, ...] = (
    ". ", ", ", "_", "‿", "⁀", "⁔", "︳", "︴", "﹍", "﹎", "﹏", "＿", "-", "֊", "־", "᐀", "᠆", "‐", "‒", "–",
    "—", "―", "⸗", "⸚", "⸺", "⸻", "⹀", "〜", "〰", "゠", "︱", "︲", "﹘", "﹣", "－", "𐺭", ")",
    "]", "}", "༻", "༽", "᚜", "⁆", "⁾", "₎", "⌉", "⌋", "\u232a", "❩", "❫", "❭", "❯", "❱", "❳", "❵", "⟆",
    "⟧", "⟩", "⟫", "⟭", "⟯", "⦄", "⦆", "⦈", "⦊", "⦌", "⦎", "⦐", "⦒", "⦔", "⦖", "⦘", "⧙", "⧛", "⧽",
    "⸣", "⸥", "⸧", "⸩", "\u3009", "》", "」", "』", "】", "〕", "〗", "〙", "〛", "〞", "〟", "\ufd3e",
    "︘", "︶", "︸", "︺", "︼", "︾", "﹀", "﹂", "﹄", "﹈", "﹚", "﹜", "﹞", "）", "］", "｝",
    "｠", "｣", "»", "’", "”", "›", "⸃", "⸅", "⸊", "⸍", "⸝", "⸡", "«", "‘", "‛", "“", "‟", "‹", "⸂",
    "⸄", "⸉", "⸌", "⸜", "⸠", "(", "[", "{", "༺", "༼", "᚛", "‚", "„", "⁅", "⁽", "₍", "⌈", "⌊", "\u2329",
    "❨", "❪", "❬", "❮", "❰", "❲", "❴", "⟅", "⟦", "⟨", "⟪", "⟬", "⟮", "⦃", "⦅", "⦇", "⦉", "⦋", "⦍",
    "⦏", "⦑", "⦓", "⦕", "⦗", "⧘", "⧚", "⧼", "⸢", "⸤", "⸦", "⸨", "⹂", "\u3008", "《", "「", "『", "【",
    "〔", "〖", "〘", "〚", "〝", "\ufd3f", "︗", "︵", "︷", "︹", "︻", "︽", "︿", "﹁", "﹃", "﹇",
    "﹙", "﹛", "﹝", "（", "［", "｛", "｟", "｢", "!", "\"", "#", "%", "&", "'", "*", ",", ".",
    "/", ":", ";", "?", "@", "\\", "¡", "§", "¶", "\u00b7", "¿", "\u037e", "\u0387", "՚", "՛", "՜", "՝", "՞", "՟",
    "։", "׀", "׃", "׆", "׳", "״", "؉", "؊", "،", "؍", "؛", "؞", "؟", "٪", "٭", "۔", "܀", "܁", "܂",
    "܃", "܄", "܅", "܆", "܇", "܈", "܉", "܊", "܋", "܌", "܍", "߷", "߸", "߹", "࠰", "࠱", "࠲", "࠳", "࠴",
    "࠵", "࠶", "࠷", "࠸", "࠹", "࠺", "࠻", "࠼", "࠽", "࠾", "࡞", "।", "॥", "॰", "৽", "੶", "૰", "౷", "಄",
    "෴", "๏", "๚", "๛", "༄", "༅", "༆", "༇", "༈", "༉", "༊", "་", "།", "༎", "༏", "༐", "༑", "༒", "༔",
    "྅", "࿐", "࿑", "࿒", "࿓", "࿔", "࿙", "࿚", "၊", "။", "၌", "၍", "၎", "၏", "჻", "፠", "፡", "።", "፣",
    "፤", "፥", "፦", "፧", "፨", "᙮", "᛫", "᛬", "᛭", "᜵", "᜶", "។ល។", "។", "៕", "៖", "៘", "៙", "៚", "᠀", "᠁",
    "᠂", "᠃", "᠄", "᠅", "᠇", "᠈", "᠉", "᠊", "᥄", "᥅", "᨞", "᨟", "᪠", "᪡", "᪢", "᪣", "᪤", "᪥", "᪦",
    "᪨", "᪩", "᪪", "᪫", "᪬", "᪭", "᭚", "᭛", "᭜", "᭝", "᭞", "᭟", "᭠", "᯼", "᯽", "᯾", "᯿", "᰻", "᰼",
    "᰽", "᰾", "᰿", "᱾", "᱿", "᳀", "᳁", "᳂", "᳃", "᳄", "᳅", "᳆", "᳇", "᳓", "‖", "‗", "†", "‡", "•",
    "‣", "․", "‥", "…", "‧", "‰", "‱", "′", "″", "‴", "‵", "‶", "‷", "‸", "※", "‼", "‽", "‾", "⁁",
    "⁂", "⁃", "⁇", "⁈", "⁉", "⁊", "⁋", "⁌", "⁍", "⁎", "⁏", "⁐", "⁑", "⁓", "⁕", "⁖", "⁗", "⁘", "⁙",
    "⁚", "⁛", "⁜", "⁝", "⁞", "⳹", "⳺", "⳻", "⳼", "⳾", "⳿", "⵰", "⸀", "⸁", "⸆", "⸇", "⸈", "⸋", "⸎",
    "⸏", "⸐", "⸑", "⸒", "⸓", "⸔", "⸕", "⸖", "⸘", "⸙", "⸛", "⸞", "⸟", "⸪", "⸫", "⸬", "⸭", "⸮", "⸰",
    "⸱", "⸲", "⸳", "⸴", "⸵", "⸶", "⸷", "⸸", "⸹", "⸼", "⸽", "⸾", "⸿", "⹁", "⹃", "⹄", "⹅", "⹆", "⹇",
    "⹈", "⹉", "⹊", "⹋", "⹌", "⹍", "⹎", "⹏", "⹒", "、", "。", "〃", "〽", "・", "꓾", "꓿", "꘍", "꘎",
    "꘏", "꙳", "꙾", "꛲", "꛳", "꛴", "꛵", "꛶", "꛷", "꡴", "꡵", "꡶", "꡷", "꣎", "꣏", "꣸", "꣹", "꣺", "꣼",
    "꤮", "꤯", "꥟", "꧁", "꧂", "꧃", "꧄", "꧅", "꧆", "꧇", "꧈", "꧉", "꧊", "꧋", "꧌", "꧍", "꧞", "꧟", "꩜",
    "꩝", "꩞", "꩟", "꫞", "꫟", "꫰", "꫱", "꯫", "︐", "︑", "︒", "︓", "︔", "︕", "︖", "︙", "︰",
    "﹅", "﹆", "﹉", "﹊", "﹋", "﹌", "﹐", "﹑", "﹒", "﹔", "﹕", "﹖", "﹗", "﹟", "﹠", "﹡",
    "﹨", "﹪", "﹫", "！", "＂", "＃", "％", "＆", "＇", "＊", "，", "．", "／", "：", "；", "？",
    "＠", "＼", "｡", "､", "･", "𐄀", "𐄁", "𐄂", "𐎟", "𐏐", "𐕯", "𐡗", "𐤟", "𐤿", "𐩐", "𐩑", "𐩒", "𐩓",
    "𐩔", "𐩕", "𐩖", "𐩗", "𐩘", "𐩿", "𐫰", "𐫱", "𐫲", "𐫳", "𐫴", "𐫵", "𐫶", "𐬹", "𐬺", "𐬻", "𐬼", "𐬽", "𐬾",
    "𐬿", "𐮙", "𐮚", "𐮛", "𐮜", "𐽕", "𐽖", "𐽗", "𐽘", "𐽙", "𑁇", "𑁈", "𑁉", "𑁊", "𑁋", "𑁌", "𑁍", "𑂻", "𑂼",
    "𑂾", "𑂿", "𑃀", "𑃁", "𑅀", "𑅁", "𑅂", "𑅃", "𑅴", "𑅵", "𑇅", "𑇆", "𑇇", "𑇈", "𑇍", "𑇛", "𑇝", "𑇞", "𑇟",
    "𑈸", "𑈹", "𑈺", "𑈻", "𑈼", "𑈽", "𑊩", "𑑋", "𑑌", "𑑍", "𑑎", "𑑏", "𑑚", "𑑛", "𑑝", "𑓆", "𑗁", "𑗂", "𑗃",
    "𑗄", "𑗅", "𑗆", "𑗇", "𑗈", "𑗉", "𑗊", "𑗋", "𑗌", "𑗍", "𑗎", "𑗏", "𑗐", "𑗑", "𑗒", "𑗓", "𑗔", "𑗕", "𑗖",
    "𑗗", "𑙁", "𑙂", "𑙃", "𑙠", "𑙡", "𑙢", "𑙣", "𑙤", "𑙥", "𑙦", "𑙧", "𑙨", "𑙩", "𑙪", "𑙫", "𑙬", "𑜼", "𑜽",
    "𑜾", "𑠻", "𑥄", "𑥅", "𑥆", "𑧢", "𑨿", "𑩀", "𑩁", "𑩂", "𑩃", "𑩄", "𑩅", "𑩆", "𑪚", "𑪛", "𑪜", "𑪞", "𑪟",
    "𑪠", "𑪡", "𑪢", "𑱁", "𑱂", "𑱃", "𑱄", "𑱅", "𑱰", "𑱱", "𑻷", "𑻸", "𑿿", "𒑰", "𒑱", "𒑲", "𒑳", "𒑴", "𖩮",
    "𖩯", "𖫵", "𖬷", "𖬸", "𖬹", "𖬺", "𖬻", "𖭄", "𖺗", "𖺘", "𖺙", "𖺚", "𖿢", "𛲟", "𝪇", "𝪈", "𝪉", "𝪊", "𝪋",
    "𞥞", "𞥟", "\n", "\r", "\u2029",
    " ", "\u00a0", "\u1680", "\u2000", "\u2001", "\u2002", "\u2003", "\u2004", "\u2005", "\u2006",
    "\u2007", "\u2008", "\u2009", "\u200a", "\u202f", "\u205f", "\u3000", "`",
)

# Separators that end a context (sentence, clause or paragraph).
CONTEXT_SEPARATORS: tuple[str, ...] = (
    "᠆",  # Mongolian todo soft hyphen, end of a paragraph
    "᚛", "᚜",  # Ogham start and end of text
    "!", ". ", ", ", ";", "?", "¡", "§", "¶", "¿", "\u037e",  # Latin
    "՜", "՝", "՞", "։",  # Armenian
    "׃",  # Hebrew sof pasuq
    "،", "؛", "؟", "۔",  # Arabic
    "܀", "܁", "܂", "܃", "܄", "܅", "܆", "܇", "܈", "܉",  # Syriac
    "߷", "߸", "߹",  # NKo
    "࠰", "࠱", "࠲", "࠳", "࠴", "࠵", "࠸", "࠹", "࠺", "࠻", "࠼", "࠽", "࠾",  # Samaritan
    "࡞",  # Mandaic
    "।", "॥",  # Devanagari
    "෴",  # Sinhala
    "๚", "๛",  # Thai
    "༄", "༅", "༆", "༇", "༈", "༉", "༊", "།", "༎", "༏", "༐", "༑", "༒", "༔", "࿐", "࿑", "࿒", "࿓", "࿔",  # Tibetan
    "၊", "။",  # Myanmar
    "჻",  # Georgian
    "።", "፣", "፤", "፥", "፦", "፧", "፨",  # Ethiopic
    "᛫", "᛬", "᛭",  # Runic
    "᜵", "᜶",  # Philippine
    "។", "៕", "៖", "៘", "។ល។", "៚",  # Khmer
    "᠀", "᠁", "᠂", "᠃", "᠄", "᠅", "᠈", "᠉",  # Mongolian
    "᥄", "᥅",  # Limbu
    "᨟",  # Buginese
    "᪨", "᪩", "᪪", "᪫", "᪬", "᪭",  # Tai Tham
    "᭚", "᭛", "᭜", "᭝", "᭞", "᭟", "᭠",  # Balinese
    "᯼", "᯽", "᯾", "᯿",  # Batak
    "᰻", "᰼", "᰽", "᰾", "᰿",  # Lepcha
    "᱾", "᱿",  # Ol Chiki
    "᳀", "᳁", "᳂", "᳃", "᳄", "᳅", "᳆", "᳇",  # Sundanese
    "․", "‥", "…", "※", "‼", "‽", "⁇", "⁈", "⁉", "⁏", "⁖", "⁚",  # general
    "⳹", "⳺", "⳻", "⳼", "⳾",  # Nubian
    "⸘", "⸮", "⹁",  # general
    "、", "。",  # CJK
    "꓾", "꓿",  # Lisu
    "꘍", "꘎", "꘏",  # Vai
    "꛲", "꛳", "꛴", "꛵", "꛶", "꛷",  # Bamum
    "꡶", "꡷",  # Phags-pa
    "꣎", "꣏",  # Saurashtra
    "꤯",  # Kayah Li
    "꥟",  # Rejang
    "꧃", "꧄", "꧅", "꧆", "꧇", "꧈", "꧉", "꧊", "꧋", "꧌", "꧍",  # Javanese
    "꩜", "꩝", "꩞", "꩟",  # Cham
    "꫟",  # Tai Viet
    "꫰", "꫱", "꯫",  # Meetei Mayek
    "︐", "︑", "︒", "︓", "︔", "︕", "︖", "︙", "︰", "﹅", "﹐", "﹑", "﹒", "﹔", "﹕", "﹖", "﹗",
    "！", "，", "．", "：", "；", "？", "｡", "､",  # fullwidth and small forms
    "𐡗",  # Imperial Aramaic
    "𐩐", "𐩑", "𐩒", "𐩓", "𐩔", "𐩕", "𐩖", "𐩗", "𐩘",  # Kharoshthi
    "𐫰", "𐫱", "𐫲", "𐫳", "𐫴", "𐫵",  # Manichaean
    "𐬺", "𐬻", "𐬼", "𐬽", "𐬾", "𐬿",  # Avestan
    "𐮙", "𐮚", "𐮛", "𐮜",  # Psalter Pahlavi
    "𐽕", "𐽖", "𐽗", "𐽘", "𐽙",  # Sogdian
    "𑁇", "𑁈", "𑁉", "𑁊", "𑁋", "𑁌", "𑁍",  # Brahmi
    "𑂾", "𑂿", "𑃀", "𑃁",  # Kaithi
    "𑅀", "𑅁", "𑅂", "𑅃",  # Chakma
    "𑅵",  # Mahajani
    "𑇅", "𑇆", "𑇍", "𑇞", "𑇟",  # Sharada
    "𑈸", "𑈹", "𑈻", "𑈼",  # Khojki
    "𑊩",  # Multani
    "𑑋", "𑑌", "𑑍", "𑑚",  # Newa
    "𑗂", "𑗃", "𑗉", "𑗊", "𑗋", "𑗌", "𑗍", "𑗎", "𑗏", "𑗐", "𑗑", "𑗒", "𑗓", "𑗔", "𑗕", "𑗖", "𑗗",  # Siddham
    "𑙁", "𑙂",  # Modi
    "𑙠", "𑙡", "𑙢", "𑙣", "𑙤", "𑙥", "𑙦", "𑙧", "𑙨", "𑙩", "𑙪", "𑙫", "𑙬",  # Mongolian supplement
    "𑜼", "𑜽", "𑜾",  # Ahom
    "𑥄", "𑥆",  # Dives Akuru
    "𑨿", "𑩀", "𑩁", "𑩂", "𑩃", "𑩄", "𑩅", "𑩆",  # Zanabazar Square
    "𑪚", "𑪛", "𑪜", "𑪞", "𑪟", "𑪠", "𑪡", "𑪢",  # Soyombo
    "𑱁", "𑱂",  # Bhaiksuki
    "𑱰", "𑱱",  # Marchen
    "𑻷", "𑻸",  # Makasar
    "𑿿",  # Tamil
    "𒑱", "𒑲", "𒑳", "𒑴",  # Cuneiform
    "𖩮", "𖩯",  # Mro
    "𖫵",  # Bassa Vah
    "𖬷", "𖬸", "𖬹", "𖭄",  # Pahawh Hmong
    "𖺗", "𖺘", "𖺙", "𖺚",  # Medefaidrin
    "𛲟",  # Duployan
    "𝪇", "𝪈", "𝪉", "𝪊",  # SignWriting
    "𞥞", "𞥟",  # Adlam
)