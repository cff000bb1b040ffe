"""Non-breaking prefix tables.

Each entry lists, whitespace separated, the tokens after which a period does
not end a token (``always``) and the tokens that only keep their period when
the next token is a number (``numeric_only``). The lists follow the Moses
``nonbreaking_prefix.<lang>`` files.
"""

from __future__ import annotations

import string

from tokenaisu.languages.base import Language, PrefixKind

_LATIN = " ".join(string.ascii_uppercase)
_TITLES = "Dr Mr Mrs Ms Prof St"
_MONTHS_EN = "Jan Feb Mar Apr Jun Jul Aug Sep Sept Oct Nov Dec"

_BENGALI = "ক খ গ ঘ ঙ চ ছ জ ঝ ঞ ট ঠ ড ঢ ণ ত থ দ ধ ন প ফ ব ভ ম য র ল শ ষ স হ"
_ASSAMESE = "ক খ গ ঘ ঙ চ ছ জ ঝ ঞ ট ঠ ড ঢ ণ ত থ দ ধ ন প ফ ব ভ ম য ৰ ল ৱ শ ষ স হ"
_DEVANAGARI = "क ख ग घ ङ च छ ज झ ञ ट ठ ड ढ ण त थ द ध न प फ ब भ म य र ल व श ष स ह"
_GUJARATI = "ક ખ ગ ઘ ચ છ જ ઝ ટ ઠ ડ ઢ ણ ત થ દ ધ ન પ ફ બ ભ મ ય ર લ વ શ ષ સ હ ળ"
_GURMUKHI = "ਕ ਖ ਗ ਘ ਙ ਚ ਛ ਜ ਝ ਞ ਟ ਠ ਡ ਢ ਣ ਤ ਥ ਦ ਧ ਨ ਪ ਫ ਬ ਭ ਮ ਯ ਰ ਲ ਵ ਸ ਹ"
_KANNADA = "ಕ ಖ ಗ ಘ ಚ ಛ ಜ ಝ ಟ ಠ ಡ ಢ ಣ ತ ಥ ದ ಧ ನ ಪ ಫ ಬ ಭ ಮ ಯ ರ ಲ ವ ಶ ಷ ಸ ಹ ಳ"
_MALAYALAM = "ക ഖ ഗ ഘ ങ ച ഛ ജ ഝ ഞ ട ഠ ഡ ഢ ണ ത ഥ ദ ധ ന പ ഫ ബ ഭ മ യ ര ല വ ശ ഷ സ ഹ ള ഴ റ"
_ODIA = "କ ଖ ଗ ଘ ଙ ଚ ଛ ଜ ଝ ଞ ଟ ଠ ଡ ଢ ଣ ତ ଥ ଦ ଧ ନ ପ ଫ ବ ଭ ମ ଯ ର ଲ ଳ ଶ ଷ ସ ହ"
_TAMIL = "க ங ச ஞ ட ண த ந ப ம ய ர ல வ ழ ள ற ன"
_TELUGU = "క ఖ గ ఘ చ ఛ జ ఝ ట ఠ డ ఢ ణ త థ ద ధ న ప ఫ బ భ మ య ర ల వ శ ష స హ ళ"

_PREFIXES: dict[Language, tuple[str, str]] = {
    Language.AS: (f"{_LATIN} {_ASSAMESE} {_TITLES} ডঃ ড", ""),
    Language.BN: (f"{_LATIN} {_BENGALI} {_TITLES} ডঃ ডা", ""),
    Language.CA: (
        f"""{_LATIN}
        Sr Sra Srta Dr Dra Prof Gral Av Pl Pg Ctra Ptge Mn
        a.C d.C aprox c cap ca cf dept etc ex fig gen tel vol vs
        gen feb març abr maig jul ag set oct nov des""",
        "núm pàg art p pp",
    ),
    Language.CS: (
        f"""{_LATIN} Č Ř Š Ž
        Bc BcA Ing Ing.arch MUDr MVDr MgA Mgr JUDr PhDr RNDr PharmDr ThLic ThDr
        Ph.D Th.D prof doc CSc DrSc dr mg MBA Dr
        a.s s.r.o spol tj tzn např atd apod resp mj popř ca cca př.n.l n.l ul tel
        led úno bře dub kvě čvn čvc srp zář říj lis pro""",
        "č čís str s",
    ),
    Language.DE: (
        f"""{_LATIN} Ä Ö Ü
        a b c d e f g h i j k l m n o p q r s t u v w x y z ä ö ü
        I II III IV V VI VII VIII IX X XI XII XIII XIV XV XVI XVII XVIII XIX XX
        i ii iii iv vi vii viii ix xi xii xiii xiv xv xvi xvii xviii xix xx
        Abs Adj Adr Adv Allg Anm Ank Apr Aug Bd Bsp Bspw Bzgl Bzw Chr Dez Dgl Di Dipl Dir
        Do Dr Fa Feb Fr Frl Ggf Hbf Hr Hrn Inkl Jan Jh Jhd Jr Jul Jun Kap Kl Lfg Max
        Mind Mio Mo Mrd Nov Od Okt Prof Rd Sa Sep Sept So Sog Std Str Tel Tsd Usw Vgl
        Vlg Vs Weg Ziff Zzgl
        abs adj adr adv allg anm ank bd bsp bspw bzgl bzw ca chr dgl dipl dir dr eigtl
        etc evtl ggf hbf hr hrn inkl jh jhd jr kap kl lfg max mind mio mrd od prof rd
        sog std str tel tsd usw vgl vlg vs weg zB zT ziff zzgl""",
        "Nr nr Art art",
    ),
    Language.EL: (
        """Α Β Γ Δ Ε Ζ Η Θ Ι Κ Λ Μ Ν Ξ Ο Π Ρ Σ Τ Υ Φ Χ Ψ Ω
        Αθ αι αιώνα δηλ ελλ επ κ κα κυρ λ π.χ στ σελ τ τηλ υπ φ
        Ιαν Φεβ Μαρ Απρ Ιουν Ιουλ Αυγ Σεπ Οκτ Νοε Δεκ""",
        "αρ σελ",
    ),
    Language.EN: (
        f"""{_LATIN}
        Adj Adm Adv Asst Bart Bldg Brig Bros Capt Cmdr Col Comdr Con Corp Cpl DR Dr
        Drs Ens Gen Gov Hon Hr Hosp Insp Lt MM MR MRS MS Maj Messrs Mlle Mme Mr Mrs
        Ms Msgr Op Ord Pfc Ph Prof Pvt Rep Reps Res Rev Rt Sen Sens Sfc Sgt Sr St Supt
        Surg Jr Mt
        v vs i.e rev e.g
        {_MONTHS_EN}""",
        "No Nos Art Nr pp",
    ),
    Language.ES: (
        f"""{_LATIN}
        Av Avda Col Dr Dra Excmo Excma Ilmo Ilma Lic Ltda Mtro Pdte Prof Sr Sra Srta
        Sres Sto Sta Ud Uds Vd Vds
        a.C d.C aprox cap cía dpto etc ej tel vol
        Ene Feb Mar Abr Jun Jul Ago Sep Oct Nov Dic""",
        "No nº núm art pág",
    ),
    Language.ET: (
        f"""{_LATIN} Õ Ä Ö Ü
        a dr hr hrl ins jne jm jt kl km knd kod lp mh mnt mrs nn ok pr prof pk ptk rbl
        s sh skp snd t tn tr tv u ul vm vs vt""",
        "nr lk",
    ),
    Language.FI: (
        f"""{_LATIN} Å Ä Ö
        alk alv ao as ed eKr ekr em esim et ev huom ib jKr jaa jne jms jälk kok ks ksp
        l lk lkm luku milj ml mm mrd n nk noin ns oik os p pj prof puh s sd ts v ym yms
        yo yl""",
        "nro s",
    ),
    Language.FR: (
        f"""{_LATIN}
        Mlle Mme M MM Mgr Mr Dr Me St Ste Pr Prof
        apr av bd boul cf chap dir éd etc ex fig ibid id ill jr op sr st cit
        janv févr avr juil sept oct nov déc""",
        "No no nos art p pp vol",
    ),
    Language.GA: (
        f"""{_LATIN} Á É Í Ó Ú
        Uacht Dr B.Arch m.sh Co Cf cf i.e r Chr lch lgh""",
        "uimh Uimh",
    ),
    Language.GU: (f"{_LATIN} {_GUJARATI} {_TITLES} ડૉ", ""),
    Language.HI: (f"{_LATIN} {_DEVANAGARI} {_TITLES} डॉ प्रो", ""),
    Language.HU: (
        f"""{_LATIN} Á É Í Ó Ö Ő Ú Ü Ű
        Dr dr Kft Bt Rt Zrt ifj id stb kb pl ún vö ld tel ker u ford ált ill
        jan febr márc ápr jún júl aug szept okt nov dec""",
        "sz kk",
    ),
    Language.IS: (
        f"""{_LATIN} Á Ð É Í Ó Ú Ý Þ Æ Ö
        a.m.k a.s.k dr e.Kr f.Kr fh frh ft gr hr km kl m.a ma mín nk o.fl o.s.frv sbr
        sl skv t.a.m t.d þ.e þ.m.t u.þ.b""",
        "nr bls",
    ),
    Language.IT: (
        f"""{_LATIN}
        Avv Dott Dr Geom Ing Prof Sig Sigg Spett Gent Egr Ill Mons On Rag Rev Sen Onn
        Arch Chiar Cav Comm Gen Col Magg Ten Cap Sac
        dott ecc es ca sec ss
        Gen Feb Mar Apr Mag Giu Lug Ago Set Ott Nov Dic""",
        "n nn art pag pagg no",
    ),
    Language.KN: (f"{_LATIN} {_KANNADA} {_TITLES} ಡಾ", ""),
    Language.LT: (
        f"""{_LATIN} Ą Č Ę Ė Į Š Ų Ū Ž
        a akad aklg al apyg aps apskr asist asmv avd b.k b.v bkl bt buv dab d dr drp dš
        egz eil ekon el gen gim gyd gyv gr h iš jėg jun k kand kt kg km kpt l lt lot m
        mėn min mjr mln mlrd mok mst mstl n.e p pan pav pavad plg pr pirm pl proc prof
        pvz r raj red rez s sen sk skg skv sp st str t tir tūkst ul vad val vs vyr ž""",
        "nr Nr",
    ),
    Language.LV: (
        f"""{_LATIN} Ā Č Ē Ģ Ī Ķ Ļ Ņ Š Ū Ž
        dr Dr prof Prof doc apm biedr dz g gs ie iesp inž k kapt kg km kr l lpp lit m
        milj mljrd mln n nod pag piem pr r sk st t tml tūkst utt v vad""",
        "Nr nr",
    ),
    Language.ML: (f"{_LATIN} {_MALAYALAM} {_TITLES} ഡോ", ""),
    Language.MNI: (f"{_LATIN} {_BENGALI} {_TITLES}", ""),
    Language.MR: (f"{_LATIN} {_DEVANAGARI} {_TITLES} डॉ प्रा", ""),
    Language.NL: (
        f"""{_LATIN}
        Dhr Dr Drs Ing Ir Mevr Mr Prof Sr Mw
        bijv bv bzw d.w.z dhr dr drs e.a enz etc evt fam fig ing ir jhr jl mevr mr mw
        nl ong plm prof resp sr tel vgl vs zg zgn""",
        "Nr nr art",
    ),
    Language.OR: (f"{_LATIN} {_ODIA} {_TITLES}", ""),
    Language.PA: (f"{_LATIN} {_GURMUKHI} {_TITLES} ਡਾ", ""),
    Language.PL: (
        f"""{_LATIN} Ć Ł Ń Ó Ś Ź Ż
        adw afr akad al Al am amer arch art artyst astr austr bałt bdb bł bm br bryg
        bryt centr ces chem chiń chir c.d c.o cdn cz czyt dn dol dr ds dyr dz ekon ew
        gen geogr godz gr hab hr im inż itd itp jw kard kol kpt ks kuk lek lic mar mgr
        min mjr mł mn mies np ob ok op oprac os pl płk pn por prof przyp ps pt red rep
        rez sp st szt tel tj tys ul ur wg wiceprez wł woj wsp zob zm""",
        "nr Nr s str t",
    ),
    Language.PT: (
        f"""{_LATIN}
        Dr Dra Sr Sra Srta Prof Profa Eng Exmo Exma Ilmo Ilma Av Lda Ltda Cia
        Jan Fev Mar Abr Mai Jun Jul Ago Set Out Nov Dez
        adj cap cf dr ed ex fig ib etc""",
        "No nº art pág p vol",
    ),
    Language.RO: (
        f"""{_LATIN} Ă Â Î Ș Ț
        Dl Dna Dnei Dr Prof Sf Str Bd Ing Lt Col Gen
        etc ex pct str tel""",
        "Nr nr art p pag vol",
    ),
    Language.RU: (
        """А Б В Г Д Е Ж З И К Л М Н О П Р С Т У Ф Х Ц Ч Ш Щ Э Ю Я
        акад ген гр д др им инж кв кг км кол корп м мин млн млрд мм напр о пер пл пос
        пр проф р руб св см ст стр т тт тыс ул ф ч г гг""",
        "п пп",
    ),
    Language.SK: (
        f"""{_LATIN} Á Ä Č Ď É Í Ĺ Ľ Ň Ó Ô Ŕ Š Ť Ú Ý Ž
        Bc Mgr RNDr PharmDr PhDr JUDr PaedDr ThDr Ing MUDr MDDr MVDr Dr ThLic PhD ArtD
        Dr.h.c prof doc DrSc CSc ml atď apod mil mld tis napr tzv resp tj pozn r sv st
        tel tr ul""",
        "č str s",
    ),
    Language.SL: (
        f"""{_LATIN} Č Š Ž
        dr Dr itd itn npr ipd mag prof tj oz dipl inž mr ga g tel""",
        "št",
    ),
    Language.SO: (f"{_LATIN} Dr Prof C.M Mr Mrs Mw", ""),
    Language.SV: (
        f"""{_LATIN} Å Ä Ö
        AB G VG dvs etc from iaf jfr kl kr mao mfl mm osv pga tex tom vs""",
        "nr Nr s",
    ),
    Language.TA: (f"{_LATIN} {_TAMIL} {_TITLES}", ""),
    Language.TDT: (f"{_LATIN} Dr Sr Sra Prof Eng Pd etc", "No Nu"),
    Language.TE: (f"{_LATIN} {_TELUGU} {_TITLES} డా", ""),
    Language.YUE: (f"{_LATIN} {_TITLES}", "No"),
    Language.ZH: (f"{_LATIN} {_TITLES}", "No"),
}


def build_prefix_table(language: Language) -> dict[str, PrefixKind]:
    """Build the prefix -> kind mapping for ``language``."""
    always, numeric_only = _PREFIXES[language]
    table = {prefix: PrefixKind.ALWAYS for prefix in always.split()}
    for prefix in numeric_only.split():
        table[prefix] = PrefixKind.NUMERIC_ONLY
    return table
