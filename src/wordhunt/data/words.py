# Built-in English word list: a small starter set of three- and four-letter
# words. Pass a larger list (see wordlist.load_word_list) for real games.

DEFAULT_WORDS = frozenset("""
ACE AID AIL AIM AIR ALE ALL ALP AMP AND ANT APE APT ARC ARK ARM
ART ASH ASK ASP BAD BAG BAN BAR BAT BAY BED BEE BEG BET BIB BID
BIG BIN BIT BOA BOB BOG BOW BOX BOY BUD BUG BUM BUN BUS BUT BUY
CAB CAD CAM CAN CAP CAR CAT COD COG CON COP COT COW CRY CUB CUE
CUP CUT DAD DAM DAN DAY DEN DEW DID DIE DIG DIM DIN DIP DOG DOT
DRY DUB DUE DUG DYE EAR EAT EBB EEL EGG EGO ELF ELK ELM END ERA
EVE EWE EYE FAD FAN FAR FAT FED FEE FEN FEW FIB FIG FIN FIR FIT
FIX FLU FLY FOE FOG FOR FOX FRY FUN FUR GAG GAP GAS GEL GEM GET
GAME GATE GOAL GOOD HAVE HELP HOME HOPE IDEA INFO JOIN KEEP KIND KNOW
LAND LIFE LINE LINK LIST LIVE LOVE MAKE MANY MARK MEET MIND MOVE MUST
NAME NEED NEWS NEXT NICE NOTE OPEN PAGE PAIR PARK PART PASS PAST PATH
PLAN PLAY POST PULL PUSH QUIT RACE READ REAL REST RISE RISK ROAD ROCK
ROLE ROOM RULE RUNS SAFE SAVE SEAT SEES SELF SEND SETS SHIP SHOP SHOW
SIDE SIGN SITE SIZE SKIN SOME SORT SPOT STAR STAY STEP STOP SUCH SURE
TAKE TALK TASK TEAM TELL TERM TEST TEXT THAN THAT THEM THEN THEY THIS
TIME TINY TOLD TOOK TOOL TRUE TURN TYPE UNIT UPON USED USER VERY VIEW
VOTE WAIT WALK WANT WARM WASH WAVE WAYS WEAK WEAR WEEK WELL WENT WERE
WEST WHAT WHEN WHOM WIDE WIFE WILD WILL WIND WINE WING WIRE WISE WISH
WITH WOOD WORD WORK YEAR YOUR ZERO ZONE
""".split())
