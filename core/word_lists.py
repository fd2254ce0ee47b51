"""Static word banks for each grade level (Dolch and Fry sight words)."""

from .grades import GradeLevel
from .interfaces import WordBankProvider

DOLCH_PRE_PRIMER = """
a and away big blue can come down find for funny go help here i in is it jump
little look make me my not one play red run said see the three to two up we
where yellow you
"""

DOLCH_PRIMER = """
all am are at ate be black brown but came did do eat four get good have he into
like must new no now on our out please pretty ran ride saw say she so soon that
there they this too under want was well went what white who will with yes
"""

DOLCH_FIRST = """
after again an any as ask by could every fly from give going had has her him his
how just know let live may of old once open over put round some stop take thank
them then think walk were when
"""

DOLCH_SECOND = """
always around because been before best both buy call cold does don't fast first
five found gave goes green its made many off or pull read right sing sit sleep
tell their these those upon us use very wash which why wish work would write your
"""

DOLCH_THIRD = """
about better bring carry clean cut done draw drink eight fall far full got grow
hold hot hurt if keep kind laugh light long much myself never only own pick seven
shall show six small start ten today together try warm
"""

FRY_001_100 = """
the of and a to in is you that it he was for on are as with his they i at be
this have from or one had by words but not what all were we when your can said
there use an each which she do how their if will up other about out many then
them these so some her would make like him into time has look two more write go
see number no way could people my than first water been call who oil its now
find long down day did get come made may part
"""

FRY_101_200 = """
over new sound take only little work know place years live me back give most
very after things our just name good sentence man think say great where help
through much before line right too means old any same tell boy follow came want
show also around form three small set put end does another well large must big
even such because turn here why asked went men read need land different home us
move try kind hand picture again change off play spell air away animal house
point page letter mother answer found study still learn should america world
"""

FRY_201_300 = """
high every near add food between own below country plant last school father keep
tree never start city earth eyes light thought head under story saw left few
while along might close something seem next hard open example begin life always
those both paper together got group often run important until children side feet
car mile night walk white sea began grow took river four carry state once book
hear stop without second later miss idea enough eat face watch far indian really
almost let above girl sometimes mountains cut young talk soon list song being
leave family
"""

FRY_301_400 = """
body music color stand sun questions fish area mark dog horse birds problem
complete room knew since ever piece told usually friends easy heard order red
door sure become top ship across today during short better best however low hours
black products happened whole measure remember early waves reached listen wind
rock space covered fast several hold himself toward five step morning passed
vowel true hundred against pattern numeral table north slowly money map farm
pulled draw voice seen cold cried plan notice south sing war ground fall king
town unit figure certain field travel wood fire upon
"""

FRY_401_600 = """
done english road half ten fly gave box finally wait correct oh quickly person
became shown minutes strong verb stars front feel fact inches street decided
contain course surface produce building ocean class note nothing rest carefully
scientists inside wheels stay green known island week less machine base ago stood
plane system behind ran round boat game force brought understand warm common
bring explain dry though language shape deep thousands yes clear equation yet
government filled heat full hot check object am rule among noun power cannot able
six size dark ball material special heavy fine pair circle include built
can't matter square syllables perhaps bill felt suddenly test direction center
farmers ready anything divided general energy subject europe moon region return
believe dance members picked simple cells paint mind love cause rain exercise eggs
train blue wish drop developed window difference distance heart sit sum summer
wall forest probably legs sat main winter wide written length reason kept
interest arms brother race present beautiful store job edge past sign record
finished discovered wild happy beside gone sky glass million west lay weather
root instruments meet third months paragraph raised represent soft whether
clothes flowers shall teacher held describe drive
"""

FRY_601_1000 = """
cross speak solve appear metal son either ice sleep village factors result
jumped snow ride care floor hill pushed baby buy century outside everything tall
already instead phrase soil bed copy free hope spring case laughed nation quite
type themselves temperature bright lead everyone method section lake consonant
within dictionary hair age amount scale pounds although per broken moment tiny
possible gold milk quiet natural lot stone act build middle speed count cat
someone sail rolled bear wonder smiled angle fraction africa killed melody bottom
trip hole poor let's fight surprise french died beat exactly remain dress iron
couldn't fingers row least catch climbed wrote shouted continued itself else
plains gas england burning design joined foot law ears grass you're grew skin
valley cents key president brown trouble cool cloud lost sent symbols wear bad
save experiment engine alone drawing east pay single touch information express
mouth yard equal decimal yourself control practice report straight rise statement
stick party seeds suppose woman coast bank period wire choose clean visit bit
whose received garden please strange caught fell team god captain direct ring
serve child desert increase history cost maybe business separate break uncle
hunting flow lady students human art feeling supply corner electric insects
crops tone hit sand doctor provide thus won't cook bones tail board modern
compound mine wasn't fit addition belong safe soldiers guess silent trade rather
compare crowd poem enjoy elements indicate except expect flat seven interesting
sense string blow famous value wings movement pole exciting branches thick blood
lie spot bell fun loud consider suggested thin position entered fruit tied rich
dollars send sight chief japanese stream planets rhythm eight science major
observe tube necessary weight meat lifted process army hat property particular
swim terms current park sell shoulder industry wash block spread cattle wife
sharp company radio we'll action capital factories settled yellow isn't southern
truck fair printed wouldn't ahead chance born level triangle molecules france
repeated column western church sister oxygen plural various agreed opposite wrong
chart prepared pretty solution fresh shop suffix especially shoes actually nose
afraid dead sugar adjective fig office huge gun similar death score forward
stretched experience rose allow fear workers washington greek women bought led
march northern create british difficult match win doesn't steel total deal
determine evening nor rope cotton apple details entire corn substances smell
tools conditions cows track arrived located sir seat division effect underline
view
"""


def load_words(content: str) -> list[str]:
    """Parse a whitespace-separated word list into lowercase letter-only words.

    Order is kept and duplicates are dropped; entries with apostrophes are
    skipped because challenge input only accepts letters.
    """
    words = []
    seen = set()
    for word in content.split():
        word = word.strip().lower()
        if not word.isalpha() or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def _combine(*lists: str) -> list[str]:
    return load_words('\n'.join(lists))


WORDS_BY_GRADE = {
    GradeLevel.PRE_K: _combine(DOLCH_PRE_PRIMER),
    GradeLevel.KINDERGARTEN: _combine(DOLCH_PRIMER),
    GradeLevel.FIRST: _combine(DOLCH_FIRST, FRY_001_100),
    GradeLevel.SECOND: _combine(DOLCH_SECOND, FRY_101_200),
    GradeLevel.THIRD: _combine(DOLCH_THIRD, FRY_201_300),
    GradeLevel.FOURTH: _combine(FRY_301_400),
    GradeLevel.FIFTH: _combine(FRY_401_600),
    GradeLevel.SIXTH: _combine(FRY_601_1000),
}


class StaticWordBank(WordBankProvider):
    """Word banks built from the bundled sight-word lists."""

    def __init__(self, words_by_grade: dict = None):
        source = WORDS_BY_GRADE if words_by_grade is None else words_by_grade
        self._words_by_grade = {level: list(words) for level, words in source.items()}

    def words_for(self, level: GradeLevel) -> list[str]:
        return list(self._words_by_grade.get(level, []))

    def word_count(self, level: GradeLevel) -> int:
        """Get the number of words in a grade's bank."""
        return len(self._words_by_grade.get(level, []))
