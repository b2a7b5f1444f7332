LEXICON = [
    "le;le;DETart",
    "la;le;DETart",
    "les;le;DETart",
    "un;un;DETindef",
    "une;un;DETindef",
    "chat;chat;SUB",
    "chats;chat;SUB",
    "chatte;chat;SUB",
    "souris;souris;SUB",
    "maison;maison;SUB",
    "jardin;jardin;SUB",
    "noir;noir;ADJ",
    "noire;noir;ADJ",
    "petit;petit;ADJ",
    "petite;petit;ADJ",
    "grise;gris;ADJ",
    "dort;dormir;VERB",
    "dorment;dormir;VERB",
    "manger;manger;VERB",
    "mange;manger;VERB",
    "aime;aimer;VERB",
    "aimait;aimer;VERB",
    "mangé;manger;VERBppass",
    "a;avoir;VERBaux",
    "il;il;PROpers",
    "elle;elle;PROpers",
    "vous;vous;PROpers",
    "dans;dans;PREP",
    "très;très;ADV",
    "ne;ne;ADVneg",
    "pas;pas;ADVneg",
    "et;et;CONJcoord",
    "qu';que;CONJsubord",
    "parce que;parce que;CONJsubord",
    "tout à fait;tout à fait;ADVloc",
]

TEST_TEXT = "Le petit chat noir dort dans la maison. La souris grise mange, parce que le chat dort."

TEXTS = [
    "Le chat a mangé la souris. Il dort très bien dans le jardin.",

    "Elle aimait les chats noirs et la petite chatte grise ; elle ne les aime pas tout à fait autant qu'il le dit.",

    "Que direz-vous, Monsieur ? Il dit qu'il viendra demain.",
]

TEI_TEXT = """<TEI><teiHeader><title>Le chat noir</title></teiHeader>
<text><body><p>Le <hi>chat</hi> noir dort.</p></body></text></TEI>"""

# Symbols standing for occurrences, in the matcher tests.
SYMBOL_STREAM = "A B A B C A B C C A C A D D D C"
