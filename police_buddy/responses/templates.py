"""Bilingual response templates.

Every template exists in English and Telugu and is filled with
``str.format``; placeholders are named in braces.
"""

from police_buddy.config import Language

EN = Language.ENGLISH
TE = Language.TELUGU

TEMPLATES: dict[str, dict[Language, str]] = {
    "welcome": {
        EN: (
            "Hello! I'm AP Police Buddy, your AI assistant for police-related queries in Andhra "
            "Pradesh. You can speak naturally or type your questions. Try saying 'Check FIR status' "
            "or 'What crimes happened in Guntur last week?'"
        ),
        TE: (
            "నమస్కారం! నేను ఏపీ పోలీస్ బడ్డీ, ఆంధ్రప్రదేశ్‌లో పోలీస్ సంబంధిత ప్రశ్నలకు మీ AI సహాయకుడిని. "
            "మీరు సహజంగా మాట్లాడవచ్చు లేదా మీ ప్రశ్నలను టైప్ చేయవచ్చు. 'ఎఫ్‌ఐఆర్ స్థితి తనిఖీ చేయండి' లేదా "
            "'గత వారం గుంటూర్‌లో ఏ నేరాలు జరిగాయి?' అని చెప్పడానికి ప్రయత్నించండి"
        ),
    },
    "welcome_back": {
        EN: "Welcome back! I see this is your {ordinal} query today. ",
        TE: "తిరిగి స్వాగతం! ఇది ఈ రోజు మీ {count}వ ప్రశ్న అని నేను చూస్తున్నాను. ",
    },
    "greeting": {
        EN: """Hello! Welcome to AP Police Buddy. I'm here to help you with all your police-related queries in Andhra Pradesh.

I can assist you with:
• 🔍 Checking FIR status
• 📊 Getting crime statistics
• 📝 Filing complaints
• 🚨 Emergency assistance
• 🚦 Traffic rules and regulations
• 📄 Lost document procedures
• 📞 Police station contacts

What would you like to know today?""",
        TE: """నమస్కారం! AP పోలీస్ బడ్డీకి స్వాగతం. ఆంధ్రప్రదేశ్‌లో మీ పోలీస్ సంబంధిత అన్ని ప్రశ్నలకు నేను సహాయం చేస్తాను.

నేను మీకు ఇవి సహాయం చేయగలను:
• 🔍 ఎఫ్‌ఐఆర్ స్థితి తనిఖీ
• 📊 నేర గణాంకాలు పొందడం
• 📝 ఫిర్యాదులు దాఖలు చేయడం
• 🚨 అత్యవసర సహాయం
• 🚦 ట్రాఫిక్ నియమాలు
• 📄 పోయిన పత్రాల విధానాలు
• 📞 పోలీస్ స్టేషన్ సంప్రదింపులు

ఈ రోజు మీకు ఏమి తెలుసుకోవాలి?""",
    },
    "help": {
        EN: """I'm AP Police Buddy, your AI assistant for police services in Andhra Pradesh. Here's how I can help you:

🔍 **FIR Services:**
• Check FIR status: "What's the status of FIR/001/2024?"
• Learn how to file an FIR

📊 **Crime Information:**
• Get crime statistics: "Show me crimes in Guntur"
• Safety tips and alerts

📝 **Complaint Services:**
• File non-urgent complaints
• Track complaint status

🚨 **Emergency Help:**
• Get emergency contact numbers
• Immediate assistance guidance

🚦 **Traffic & Legal:**
• Traffic rules and regulations
• Document procedures

💬 **Natural Conversation:**
You can ask me questions naturally, like:
• "I lost my driving license, what should I do?"
• "Are there any recent crimes in my area?"
• "How do I contact the nearest police station?"

Just type or speak your question - I understand both English and Telugu!""",
        TE: """నేను AP పోలీస్ బడ్డీ, ఆంధ్రప్రదేశ్‌లో పోలీస్ సేవలకు మీ AI సహాయకుడిని. నేను ఎలా సహాయం చేయగలను:

🔍 **ఎఫ్‌ఐఆర్ సేవలు:**
• ఎఫ్‌ఐఆర్ స్థితి తనిఖీ: "FIR/001/2024 స్థితి ఏమిటి?"
• ఎఫ్‌ఐఆర్ ఎలా దాఖలు చేయాలో తెలుసుకోండి

📊 **నేర సమాచారం:**
• నేర గణాంకాలు: "గుంటూర్‌లో నేరాలు చూపించు"
• భద్రతా చిట్కాలు మరియు హెచ్చరికలు

📝 **ఫిర్యాదు సేవలు:**
• అత్యవసరం కాని ఫిర్యాదులు దాఖలు చేయండి
• ఫిర్యాదు స్థితిని ట్రాక్ చేయండి

🚨 **అత్యవసర సహాయం:**
• అత్యవసర సంప్రదింపు నంబర్లు
• తక్షణ సహాయం మార్గదర్శకం

🚦 **ట్రాఫిక్ & చట్టపరమైన:**
• ట్రాఫిక్ నియమాలు
• పత్రాల విధానాలు

💬 **సహజ సంభాషణ:**
మీరు నన్ను సహజంగా ప్రశ్నలు అడగవచ్చు, ఉదాహరణకు:
• "నేను నా లైసెన్స్ పోగొట్టుకున్నాను, ఏమి చేయాలి?"
• "నా ప్రాంతంలో ఇటీవలి నేరాలు ఏవైనా ఉన్నాయా?"
• "సమీప పోలీస్ స్టేషన్‌ను ఎలా సంప్రదించాలి?"

మీ ప్రశ్న టైప్ చేయండి లేదా మాట్లాడండి - నేను ఇంగ్లీష్ మరియు తెలుగు రెండూ అర్థం చేసుకుంటాను!""",
    },
    "fir_found": {
        EN: """I found your FIR! Here are the details for {case_number}:

📋 **FIR Information:**
• Status: {status}
• Police Station: {police_station}
• Investigating Officer: {officer_name}
• Crime Type: {crime_type}
• Location: {location}
• Date Reported: {date_reported}

For verification and detailed updates, please provide your registered phone number. You can also contact the investigating officer directly at the police station.

Is there anything specific about this case you'd like to know more about?""",
        TE: """మీ ఎఫ్‌ఐఆర్ దొరికింది! {case_number} కోసం వివరాలు ఇవి:

📋 **ఎఫ్‌ఐఆర్ సమాచారం:**
• స్థితి: {status}
• పోలీస్ స్టేషన్: {police_station}
• పరిశోధన అధికారి: {officer_name}
• నేర రకం: {crime_type}
• స్థానం: {location}
• నివేదించిన తేదీ: {date_reported}

ధృవీకరణ మరియు వివరమైన అప్‌డేట్‌ల కోసం, దయచేసి మీ నమోదిత ఫోన్ నంబర్ ఇవ్వండి. మీరు పోలీస్ స్టేషన్‌లో పరిశోధన అధికారిని నేరుగా కూడా సంప్రదించవచ్చు.

ఈ కేసు గురించి మీరు మరింత తెలుసుకోవాలని అనుకుంటున్న ఏదైనా నిర్దిష్టమైనది ఉందా?""",
    },
    "fir_not_found": {
        EN: """I couldn't find FIR number "{case_number}" in our records. This could be because:

• The FIR number might be typed incorrectly
• The case might be from a different district
• The FIR might be very recent and not yet updated in the system

Please double-check the FIR number format (usually FIR/XXX/YYYY) and try again. If you're still having trouble, you can:
• Contact the police station where you filed the FIR
• Visit the station with your FIR copy
• Call the investigating officer directly

Would you like me to help you find the contact details for a specific police station?""",
        TE: """మా రికార్డులలో "{case_number}" ఎఫ్‌ఐఆర్ నంబర్ కనుగొనలేకపోయాను. ఇది ఈ కారణాలవల్ల కావచ్చు:

• ఎఫ్‌ఐఆర్ నంబర్ తప్పుగా టైప్ చేయబడి ఉండవచ్చు
• కేసు వేరే జిల్లాకు చెందినది కావచ్చు
• ఎఫ్‌ఐఆర్ చాలా ఇటీవలిది మరియు ఇంకా సిస్టమ్‌లో అప్‌డేట్ కాకపోవచ్చు

దయచేసి ఎఫ్‌ఐఆర్ నంబర్ ఫార్మాట్‌ను (సాధారణంగా FIR/XXX/YYYY) తనిఖీ చేసి మళ్లీ ప్రయత్నించండి. మీకు ఇంకా ఇబ్బంది అయితే, మీరు:
• ఎఫ్‌ఐఆర్ దాఖలు చేసిన పోలీస్ స్టేషన్‌ను సంప్రదించండి
• మీ ఎఫ్‌ఐఆర్ కాపీతో స్టేషన్‌ను సందర్శించండి
• పరిశోధన అధికారిని నేరుగా కాల్ చేయండి

నిర్దిష్ట పోలీస్ స్టేషన్ కోసం సంప్రదింపు వివరాలను కనుగొనడంలో నేను మీకు సహాయం చేయాలా?""",
    },
    "fir_previous_note": {
        EN: (
            "\n\nI notice you've previously inquired about FIR {case_number}. If you're looking for "
            "that case instead, please let me know."
        ),
        TE: (
            "\n\nమీరు గతంలో ఎఫ్‌ఐఆర్ {case_number} గురించి విచారించారని నేను గమనించాను. బదులుగా మీరు ఆ "
            "కేసు కోసం చూస్తున్నట్లయితే, దయచేసి నాకు తెలియజేయండి."
        ),
    },
    "fir_request_number": {
        EN: """I'd be happy to help you check your FIR status! To look up your case, I'll need your FIR number.

Please provide your FIR number in the format: **FIR/XXX/YYYY** (for example: FIR/001/2024)

You can find this number on:
• Your FIR copy receipt
• Any documents given by the police station
• SMS notifications sent to your registered mobile number

Once you provide the FIR number, I'll give you detailed information about your case status, investigating officer, and next steps.

Don't have your FIR number handy? I can also help you contact the police station where you filed the report.""",
        TE: """మీ ఎఫ్‌ఐఆర్ స్థితిని తనిఖీ చేయడంలో నేను సంతోషంగా సహాయం చేస్తాను! మీ కేసును చూడటానికి, నాకు మీ ఎఫ్‌ఐఆర్ నంబర్ అవసరం.

దయచేసి మీ ఎఫ్‌ఐఆర్ నంబర్‌ను ఈ ఫార్మాట్‌లో ఇవ్వండి: **FIR/XXX/YYYY** (ఉదాహరణ: FIR/001/2024)

మీరు ఈ నంబర్‌ను ఇక్కడ కనుగొనవచ్చు:
• మీ ఎఫ్‌ఐఆర్ కాపీ రసీదు
• పోలీస్ స్టేషన్ ఇచ్చిన ఏదైనా పత్రాలు
• మీ నమోదిత మొబైల్ నంబర్‌కు పంపిన SMS నోటిఫికేషన్లు

మీరు ఎఫ్‌ఐఆర్ నంబర్ ఇచ్చిన తర్వాత, మీ కేసు స్థితి, పరిశోధన అధికారి మరియు తదుపరి దశల గురించి వివరమైన సమాచారం ఇస్తాను.

మీ ఎఫ్‌ఐఆర్ నంబర్ దగ్గర లేదా? మీరు రిపోర్ట్ దాఖలు చేసిన పోలీస్ స్టేషన్‌ను సంప్రదించడంలో నేను సహాయం చేయగలను.""",
    },
    "stat_line": {
        EN: "• {crime_type}: {count} cases",
        TE: "• {crime_type}: {count} కేసులు",
    },
    "crime_stats": {
        EN: """Here are the recent crime statistics for {location} (Last 7 days):

📊 **Crime Report:**
{stats}

**Safety Recommendations:**
{safety_tips}

• Emergency contact: 100
• Women's helpline: 181
• Cyber crime helpline: 1930

Would you like safety tips for a specific area or information about how to report suspicious activities?""",
        TE: """{location} కోసం ఇటీవలి నేర గణాంకాలు ఇవి (గత 7 రోజులు):

📊 **నేర నివేదిక:**
{stats}

**భద్రతా సిఫార్సులు:**
{safety_tips}

• అత్యవసర సంప్రదింపు: 100
• మహిళల హెల్ప్‌లైన్: 181
• సైబర్ క్రైమ్ హెల్ప్‌లైన్: 1930

నిర్దిష్ట ప్రాంతానికి భద్రతా చిట్కాలు లేదా అనుమానాస్పద కార్యకలాపాలను ఎలా నివేదించాలి అనే సమాచారం కావాలా?""",
    },
    "safety_parking": {
        EN: "• Be cautious of theft in parking areas\n• Avoid leaving valuables unattended",
        TE: "• పార్కింగ్ ప్రాంతాలలో దొంగతనం పట్ల జాగ్రత్త వహించండి\n• విలువైన వస్తువులను గమనించకుండా వదలకండి",
    },
    "safety_general": {
        EN: "• Stay alert in crowded areas\n• Report suspicious activities immediately",
        TE: "• రద్దీ ఉన్న ప్రాంతాలలో అప్రమత్తంగా ఉండండి\n• అనుమానాస్పద కార్యకలాపాలను వెంటనే నివేదించండి",
    },
    "latest_updates": {
        EN: "\n\n**Latest Updates:**\n{snippet}",
        TE: "\n\n**తాజా అప్‌డేట్‌లు:**\n{snippet}",
    },
    "latest_information": {
        EN: "\n\n**Latest Information:**\n{snippet}\n\nSource: {title}",
        TE: "\n\n**తాజా సమాచారం:**\n{snippet}\n\nమూలం: {title}",
    },
    "crime_pick_city": {
        EN: """I can provide you with current crime statistics for various locations in Andhra Pradesh. Please specify a city or area you're interested in, such as:

🏙️ **Major Cities:**
• Guntur
• Vijayawada
• Tirupati
• Hyderabad
• Visakhapatnam

For example, you can ask:
• "Show me crime statistics for Guntur"
• "What's the safety situation in Vijayawada?"
• "Any recent incidents in Tirupati?"

I'll provide you with recent crime data, safety recommendations, and relevant contact information for that area.

Which location would you like information about?""",
        TE: """నేను ఆంధ్రప్రదేశ్‌లోని వివిధ ప్రాంతాలకు ప్రస్తుత నేర గణాంకాలను అందించగలను. దయచేసి మీకు ఆసక్తి ఉన్న నగరం లేదా ప్రాంతాన్ని పేర్కొనండి:

🏙️ **ప్రధాన నగరాలు:**
• గుంటూర్
• విజయవాడ
• తిరుపతి
• హైదరాబాద్
• విశాఖపట్నం

ఉదాహరణకు, మీరు అడగవచ్చు:
• "గుంటూర్ కోసం నేర గణాంకాలు చూపించు"
• "విజయవాడలో భద్రతా పరిస్థితి ఏమిటి?"
• "తిరుపతిలో ఏదైనా ఇటీవలి సంఘటనలు?"

నేను మీకు ఇటీవలి నేర డేటా, భద్రతా సిఫార్సులు మరియు ఆ ప్రాంతానికి సంబంధించిన సంప్రదింపు సమాచారాన్ని అందిస్తాను.

మీకు ఏ ప్రాంతం గురించి సమాచారం కావాలి?""",
    },
    "file_fir": {
        EN: """I'll guide you through the process of filing an FIR (First Information Report) in Andhra Pradesh:

📝 **How to File an FIR:**

**Step 1: Visit the Police Station**
• Go to the police station in whose jurisdiction the crime occurred
• You can file an FIR 24/7 - police stations never close
• Bring a valid ID proof

**Step 2: Provide Complete Information**
• Date, time, and exact location of the incident
• Detailed description of what happened
• Names and descriptions of accused persons (if known)
• List of witnesses (if any)
• Any evidence you have

**Step 3: Get Your FIR Copy**
• Police must give you a copy with the FIR number
• Keep this copy safe - you'll need it for follow-ups
• Note down the investigating officer's name and contact

**Step 4: Follow Up**
• Contact the investigating officer for updates
• Provide any additional evidence as needed

**💡 Online FIR Option:**
For certain non-serious crimes, you can file online through the AP Police website.

**🚨 Important Notes:**
• Filing a false FIR is a punishable offense
• FIR is free of cost
• Police cannot refuse to register an FIR for cognizable offenses

**Emergency:** For urgent cases, call 100 immediately.

Do you have a specific incident you need to report, or would you like more information about any of these steps?""",
        TE: """ఆంధ్రప్రదేశ్‌లో ఎఫ్‌ఐఆర్ (మొదటి సమాచార నివేదిక) దాఖలు చేసే ప్రక్రియను నేను మీకు వివరిస్తాను:

📝 **ఎఫ్‌ఐఆర్ ఎలా దాఖలు చేయాలి:**

**దశ 1: పోలీస్ స్టేషన్‌ను సందర్శించండి**
• నేరం జరిగిన అధికార పరిధిలోని పోలీస్ స్టేషన్‌కు వెళ్లండి
• మీరు 24/7 ఎఫ్‌ఐఆర్ దాఖలు చేయవచ్చు - పోలీస్ స్టేషన్లు ఎప్పుడూ మూసివేయబడవు
• చెల్లుబాటు అయ్యే గుర్తింపు రుజువు తీసుకెళ్లండి

**దశ 2: పూర్తి సమాచారం అందించండి**
• సంఘటన తేదీ, సమయం మరియు ఖచ్చితమైన స్థానం
• ఏమి జరిగిందో వివరమైన వర్ణన
• నిందితుల పేర్లు మరియు వర్ణనలు (తెలిస్తే)
• సాక్షుల జాబితా (ఏదైనా ఉంటే)
• మీ వద్ద ఉన్న ఏదైనా సాక్ష్యం

**దశ 3: మీ ఎఫ్‌ఐఆర్ కాపీ పొందండి**
• పోలీస్ మీకు ఎఫ్‌ఐఆర్ నంబర్‌తో కాపీ ఇవ్వాలి
• ఈ కాపీని సురక్షితంగా ఉంచండి - ఫాలో-అప్‌ల కోసం మీకు అవసరం
• పరిశోధన అధికారి పేరు మరియు సంప్రదింపు గమనించండి

**దశ 4: ఫాలో అప్ చేయండి**
• అప్‌డేట్‌ల కోసం పరిశోధన అధికారిని సంప్రదించండి
• అవసరమైన ఏదైనా అదనపు సాక్ష్యాలను అందించండి

**💡 ఆన్‌లైన్ ఎఫ్‌ఐఆర్ ఎంపిక:**
కొన్ని తీవ్రమైన కాని నేరాలకు, మీరు AP పోలీస్ వెబ్‌సైట్ ద్వారా ఆన్‌లైన్‌లో దాఖలు చేయవచ్చు.

**🚨 ముఖ్యమైన గమనికలు:**
• తప్పుడు ఎఫ్‌ఐఆర్ దాఖలు చేయడం శిక్షార్హమైన నేరం
• ఎఫ్‌ఐఆర్ ఉచితం
• కాగ్నిజబుల్ నేరాలకు ఎఫ్‌ఐఆర్ నమోదు చేయడానికి పోలీస్ నిరాకరించలేరు

**అత్యవసరం:** అత్యవసర కేసుల కోసం, వెంటనే 100కు కాల్ చేయండి.

మీరు నివేదించాల్సిన నిర్దిష్ట సంఘటన ఉందా, లేదా ఈ దశలలో ఏదైనా గురించి మరింత సమాచారం కావాలా?""",
    },
    "emergency": {
        EN: """🚨 **EMERGENCY ASSISTANCE**

**Immediate Help - Call Now:**
• **Police Emergency: 100**
• **Fire Department: 101**
• **Medical Emergency: 108**
• **Women's Helpline: 181**
• **Child Helpline: 1098**

**For immediate police assistance:**
1. **Call 100** - This is the fastest way to get help
2. **Stay calm and speak clearly**
3. **Provide your exact location**
4. **Describe the emergency briefly**

**While waiting for help:**
• Stay in a safe location if possible
• Keep your phone charged and accessible
• Don't leave the scene unless it's unsafe
• If you see someone in danger, call for help immediately

**Cyber Crime Emergency: 1930**
**National Emergency: 112**

**Text-based emergency:** If you can't speak, you can send SMS to 100 with your location and emergency details.

Are you currently in an emergency situation? If so, please call 100 immediately while I provide additional guidance.

What type of emergency assistance do you need?""",
        TE: """🚨 **అత్యవసర సహాయం**

**తక్షణ సహాయం - ఇప్పుడే కాల్ చేయండి:**
• **పోలీస్ అత్యవసరం: 100**
• **అగ్నిమాపక విభాగం: 101**
• **వైద్య అత్యవసరం: 108**
• **మహిళల హెల్ప్‌లైన్: 181**
• **పిల్లల హెల్ప్‌లైన్: 1098**

**తక్షణ పోలీస్ సహాయం కోసం:**
1. **100కు కాల్ చేయండి** - ఇది సహాయం పొందడానికి వేగవంతమైన మార్గం
2. **ప్రశాంతంగా ఉండి స్పష్టంగా మాట్లాడండి**
3. **మీ ఖచ్చితమైన స్థానాన్ని అందించండి**
4. **అత్యవసర పరిస్థితిని క్లుప్తంగా వివరించండి**

**సహాయం కోసం వేచి ఉండేటప్పుడు:**
• వీలైతే సురక్షితమైన ప్రదేశంలో ఉండండి
• మీ ఫోన్ చార్జ్ మరియు అందుబాటులో ఉంచండి
• అసురక్షితం కాకపోతే సన్నివేశాన్ని వదిలిపెట్టకండి
• మీరు ఎవరైనా ప్రమాదంలో చూస్తే, వెంటనే సహాయం కోసం కాల్ చేయండి

**సైబర్ క్రైమ్ అత్యవసరం: 1930**
**జాతీయ అత్యవసరం: 112**

**టెక్స్ట్ ఆధారిత అత్యవసరం:** మీరు మాట్లాడలేకపోతే, మీ స్థానం మరియు అత్యవసర వివరాలతో 100కు SMS పంపవచ్చు.

మీరు ప్రస్తుతం అత్యవసర పరిస్థితిలో ఉన్నారా? అలా అయితే, నేను అదనపు మార్గదర్శకత్వం అందిస్తున్నప్పుడు దయచేసి వెంటనే 100కు కాల్ చేయండి.

మీకు ఎలాంటి అత్యవసర సహాయం అవసరం?""",
    },
    "police_contact": {
        EN: """📞 **Police Station Contacts & Information**

**Major Police Stations in Andhra Pradesh:**

🏢 **Guntur District:**
• Guntur City Police Station: 0863-2323100
• Guntur Rural Police Station: 0863-2323200

🏢 **Krishna District:**
• Vijayawada Central Police Station: 0866-2470100
• Vijayawada Police Station: 0866-2470200

🏢 **Chittoor District:**
• Tirupati Police Station: 0877-2287100
• Tirupati Rural Police Station: 0877-2287200

**🚨 Emergency Numbers (24/7):**
• Police Emergency: **100**
• Control Room: **1930** (Cyber Crime)
• Women's Helpline: **181**
• Senior Citizen Helpline: **1291**

**📱 How to Find Your Nearest Police Station:**
1. Call 100 and ask for the nearest station
2. Use AP Police official app
3. Visit www.appolice.gov.in
4. Google "police station near me"

**🕐 Visit Timings:**
• Emergency: 24/7 available
• General complaints: 6 AM - 10 PM (most stations)
• FIR filing: Available 24/7

**📋 What to bring when visiting:**
• Valid ID proof (Aadhar/Driving License/Passport)
• Any documents related to your complaint
• Evidence if available (photos, videos)

Which specific area do you need police station information for? I can provide more detailed contact information.""",
        TE: """📞 **పోలీస్ స్టేషన్ సంప్రదింపులు & సమాచారం**

**ఆంధ్రప్రదేశ్‌లోని ప్రధాన పోలీస్ స్టేషన్లు:**

🏢 **గుంటూర్ జిల్లా:**
• గుంటూర్ సిటీ పోలీస్ స్టేషన్: 0863-2323100
• గుంటూర్ రూరల్ పోలీస్ స్టేషన్: 0863-2323200

🏢 **కృష్ణా జిల్లా:**
• విజయవాడ సెంట్రల్ పోలీస్ స్టేషన్: 0866-2470100
• విజయవాడ పోలీస్ స్టేషన్: 0866-2470200

🏢 **చిత్తూర్ జిల్లా:**
• తిరుపతి పోలీస్ స్టేషన్: 0877-2287100
• తిరుపతి రూరల్ పోలీస్ స్టేషన్: 0877-2287200

**🚨 అత్యవసర నంబర్లు (24/7):**
• పోలీస్ అత్యవసరం: **100**
• కంట్రోల్ రూమ్: **1930** (సైబర్ క్రైమ్)
• మహిళల హెల్ప్‌లైన్: **181**
• సీనియర్ సిటిజన్ హెల్ప్‌లైన్: **1291**

**📱 మీ సమీప పోలీస్ స్టేషన్‌ను ఎలా కనుగొనాలి:**
1. 100కు కాల్ చేసి సమీప స్టేషన్‌ను అడగండి
2. AP పోలీస్ అధికారిక యాప్ ఉపయోగించండి
3. www.appolice.gov.in సందర్శించండి
4. "పోలీస్ స్టేషన్ నియర్ మీ" గూగుల్ చేయండి

**🕐 సందర్శన సమయాలు:**
• అత్యవసరం: 24/7 అందుబాటులో
• సాధారణ ఫిర్యాదులు: 6 AM - 10 PM (చాలా స్టేషన్లు)
• ఎఫ్‌ఐఆర్ దాఖలు: 24/7 అందుబాటులో

**📋 సందర్శించేటప్పుడు తీసుకెళ్లాల్సినవి:**
• చెల్లుబాటు అయ్యే గుర్తింపు రుజువు (ఆధార్/డ్రైవింగ్ లైసెన్స్/పాస్‌పోర్ట్)
• మీ ఫిర్యాదుకు సంబంధించిన ఏదైనా పత్రాలు
• అందుబాటులో ఉంటే సాక్ష్యం (ఫోటోలు, వీడియోలు)

మీకు ఏ నిర్దిష్ట ప్రాంతానికి పోలీస్ స్టేషన్ సమాచారం అవసరం? నేను మరింత వివరమైన సంప్రదింపు సమాచారాన్ని అందించగలను.""",
    },
    "traffic_rules": {
        EN: """🚦 **Traffic Rules & Services**

**Key Rules to Remember:**
• Always carry your driving license, RC and insurance papers
• Helmets are mandatory for rider and pillion on two-wheelers
• Seat belts are mandatory for all car occupants
• Do not use a mobile phone while driving

**Challans:**
• Check and pay pending challans online through the AP Police e-challan portal
• Keep the payment receipt until the challan is cleared

**Driving License:**
• Apply for or renew your license through the AP Transport portal
• Carry Aadhar and a medical certificate if you are above 50

Would you like to know about a specific rule or penalty?""",
        TE: """🚦 **ట్రాఫిక్ నియమాలు & సేవలు**

**గుర్తుంచుకోవాల్సిన ముఖ్య నియమాలు:**
• ఎల్లప్పుడూ మీ డ్రైవింగ్ లైసెన్స్, RC మరియు బీమా పత్రాలు వెంట ఉంచుకోండి
• ద్విచక్ర వాహనాలపై నడిపేవారికి మరియు వెనుక కూర్చునేవారికి హెల్మెట్ తప్పనిసరి
• కారులో అందరికీ సీట్ బెల్ట్ తప్పనిసరి
• డ్రైవింగ్ చేస్తున్నప్పుడు మొబైల్ ఫోన్ వాడకండి

**చలాన్లు:**
• AP పోలీస్ ఇ-చలాన్ పోర్టల్ ద్వారా పెండింగ్ చలాన్లను ఆన్‌లైన్‌లో తనిఖీ చేసి చెల్లించండి
• చలాన్ క్లియర్ అయ్యే వరకు చెల్లింపు రసీదు ఉంచుకోండి

**డ్రైవింగ్ లైసెన్స్:**
• AP రవాణా పోర్టల్ ద్వారా లైసెన్స్ కోసం దరఖాస్తు చేయండి లేదా పునరుద్ధరించండి
• మీకు 50 ఏళ్లు పైబడి ఉంటే ఆధార్ మరియు వైద్య ధృవీకరణ పత్రం తీసుకెళ్లండి

నిర్దిష్ట నియమం లేదా జరిమానా గురించి తెలుసుకోవాలనుకుంటున్నారా?""",
    },
    "lost_documents": {
        EN: """📄 **Lost or Stolen Documents**

**What to do:**
1. Report the loss at the nearest police station or through the AP Police online lost-article report
2. Collect the acknowledgement or report number - you'll need it for reissue
3. If the document was stolen, ask the police to register an FIR

**Reissue:**
• Aadhar: request a reprint through UIDAI
• Driving License: apply for a duplicate through the AP Transport portal
• Passport: apply for reissue through Passport Seva with the police report

**Tip:** Block linked bank cards and SIMs immediately if they were lost along with your documents.

Which document did you lose? I can share more specific steps.""",
        TE: """📄 **పోయిన లేదా దొంగిలించబడిన పత్రాలు**

**ఏమి చేయాలి:**
1. సమీప పోలీస్ స్టేషన్‌లో లేదా AP పోలీస్ ఆన్‌లైన్ పోయిన వస్తువుల నివేదిక ద్వారా నష్టాన్ని నివేదించండి
2. రసీదు లేదా నివేదిక నంబర్ తీసుకోండి - తిరిగి జారీ కోసం మీకు అవసరం
3. పత్రం దొంగిలించబడితే, ఎఫ్‌ఐఆర్ నమోదు చేయమని పోలీసులను అడగండి

**తిరిగి జారీ:**
• ఆధార్: UIDAI ద్వారా రీప్రింట్ కోసం అభ్యర్థించండి
• డ్రైవింగ్ లైసెన్స్: AP రవాణా పోర్టల్ ద్వారా డూప్లికేట్ కోసం దరఖాస్తు చేయండి
• పాస్‌పోర్ట్: పోలీస్ నివేదికతో పాస్‌పోర్ట్ సేవ ద్వారా దరఖాస్తు చేయండి

**చిట్కా:** మీ పత్రాలతో పాటు బ్యాంక్ కార్డులు మరియు సిమ్‌లు పోయినట్లయితే వెంటనే బ్లాక్ చేయండి.

మీరు ఏ పత్రం పోగొట్టుకున్నారు? నేను మరిన్ని నిర్దిష్ట దశలను పంచుకోగలను.""",
    },
    "file_complaint": {
        EN: """📝 **Filing a Complaint**

For non-urgent issues such as theft, harassment, noise or traffic problems, you can file a complaint here using the complaint form. Please have ready:
• The category of your complaint
• A short description of what happened
• The location
• A contact number where the police can reach you

You'll receive a complaint ID that you can use to follow up.

**🚨 If you are in danger, call 100 immediately.**

Would you like to file a complaint now?""",
        TE: """📝 **ఫిర్యాదు దాఖలు**

దొంగతనం, వేధింపులు, శబ్దం లేదా ట్రాఫిక్ సమస్యల వంటి అత్యవసరం కాని సమస్యల కోసం, మీరు ఫిర్యాదు ఫారం ఉపయోగించి ఇక్కడ ఫిర్యాదు దాఖలు చేయవచ్చు. దయచేసి సిద్ధంగా ఉంచండి:
• మీ ఫిర్యాదు వర్గం
• ఏమి జరిగిందో క్లుప్త వివరణ
• స్థానం
• పోలీసులు మిమ్మల్ని సంప్రదించగల ఫోన్ నంబర్

ఫాలో అప్ కోసం మీరు ఉపయోగించగల ఫిర్యాదు ID మీకు లభిస్తుంది.

**🚨 మీరు ప్రమాదంలో ఉంటే, వెంటనే 100కు కాల్ చేయండి.**

మీరు ఇప్పుడు ఫిర్యాదు దాఖలు చేయాలనుకుంటున్నారా?""",
    },
    "search_found": {
        EN: "I found some relevant information about your query:\n\n📖 **{title}**\n{snippet}\n\n",
        TE: "మీ ప్రశ్నకు సంబంధించిన కొంత సమాచారం నేను కనుగొన్నాను:\n\n📖 **{title}**\n{snippet}\n\n",
    },
    "context_prefix": {
        EN: "Based on our previous discussion:\n{history}\n\n",
        TE: "మా మునుపటి చర్చ ఆధారంగా:\n{history}\n\n",
    },
    "default": {
        EN: """I understand you're looking for assistance with police services. I'm here to help you with a wide range of police-related queries in Andhra Pradesh.

Here are some things you can ask me about:

🔍 **Case Information:**
• "Check status of FIR/001/2024"
• "How do I track my complaint?"

📊 **Safety & Crime Data:**
• "Show me recent crimes in my area"
• "Is it safe to visit [location] at night?"

📝 **Procedures & Guidance:**
• "How do I file a complaint?"
• "What documents do I need for [procedure]?"
• "I lost my license, what should I do?"

🚨 **Emergency Help:**
• "I need immediate police assistance"
• "Someone is following me"

📞 **Contact Information:**
• "Police station near me"
• "Contact details for [specific station]"

You can ask your questions naturally - I understand both English and Telugu, and I can help with both text and voice queries.

What specific information are you looking for today?""",
        TE: """మీరు పోలీస్ సేవలతో సహాయం అన్వేషిస్తున్నారని నేను అర్థం చేసుకున్నాను. ఆంధ్రప్రదేశ్‌లో పోలీస్ సంబంధిత విస్తృత శ్రేణి ప్రశ్నలతో నేను మీకు సహాయం చేయడానికి ఇక్కడ ఉన్నాను.

మీరు నన్ను ఇవి అడగవచ్చు:

🔍 **కేసు సమాచారం:**
• "FIR/001/2024 స్థితి తనిఖీ చేయండి"
• "నా ఫిర్యాదును ఎలా ట్రాక్ చేయాలి?"

📊 **భద్రత & నేర డేటా:**
• "నా ప్రాంతంలో ఇటీవలి నేరాలు చూపించు"
• "రాత్రి [స్థానం] సందర్శించడం సురక్షితమా?"

📝 **విధానాలు & మార్గదర్శకత్వం:**
• "ఫిర్యాదు ఎలా దాఖలు చేయాలి?"
• "[విధానం] కోసం నాకు ఏ పత్రాలు అవసరం?"
• "నేను నా లైసెన్స్ పోగొట్టుకున్నాను, ఏమి చేయాలి?"

🚨 **అత్యవసర సహాయం:**
• "నాకు తక్షణ పోలీస్ సహాయం అవసరం"
• "ఎవరో నన్ను అనుసరిస్తున్నారు"

📞 **సంప్రదింపు సమాచారం:**
• "నా దగ్గర పోలీస్ స్టేషన్"
• "[నిర్దిష్ట స్టేషన్] కోసం సంప్రదింపు వివరాలు"

మీరు మీ ప్రశ్నలను సహజంగా అడగవచ్చు - నేను ఇంగ్లీష్ మరియు తెలుగు రెండూ అర్థం చేసుకుంటాను, మరియు టెక్స్ట్ మరియు వాయిస్ ప్రశ్నలు రెండింటితో నేను సహాయం చేయగలను.

ఈ రోజు మీరు ఏ నిర్దిష్ట సమాచారం కోసం చూస్తున్నారు?""",
    },
    "apology": {
        EN: (
            "I apologize, but I'm having trouble processing your request right now. Please try again "
            "or contact emergency services if this is urgent."
        ),
        TE: (
            "క్షమించండి, ప్రస్తుతం మీ అభ్యర్థనను ప్రాసెస్ చేయడంలో నాకు ఇబ్బంది ఉంది. దయచేసి మళ్లీ "
            "ప్రయత్నించండి లేదా ఇది అత్యవసరమైతే అత్యవసర సేవలను సంప్రదించండి."
        ),
    },
    "case_verified": {
        EN: """✅ FIR Details Verified:

📋 FIR Number: {case_number}
📊 Status: {status}
🏢 Police Station: {police_station}
👮 Officer: {officer_name}
⚖️ Crime Type: {crime_type}
📍 Location: {location}
📅 Date: {date_reported}
📝 Description: {description}

For updates, contact the investigating officer or visit the police station.""",
        TE: """✅ ఎఫ్‌ఐఆర్ వివరాలు ధృవీకరించబడ్డాయి:

📋 ఎఫ్‌ఐఆర్ నంబర్: {case_number}
📊 స్థితి: {status}
🏢 పోలీస్ స్టేషన్: {police_station}
👮 అధికారి: {officer_name}
⚖️ నేర రకం: {crime_type}
📍 స్థానం: {location}
📅 తేదీ: {date_reported}
📝 వివరణ: {description}

అప్‌డేట్‌ల కోసం, పరిశోధన అధికారిని సంప్రదించండి లేదా పోలీస్ స్టేషన్‌ను సందర్శించండి.""",
    },
    "case_verification_failed": {
        EN: "Verification failed. The phone number does not match our records for this FIR.",
        TE: "ధృవీకరణ విఫలమైంది. ఈ ఎఫ్‌ఐఆర్ కోసం ఫోన్ నంబర్ మా రికార్డులతో సరిపోలలేదు.",
    },
    "complaint_filed": {
        EN: """✅ Complaint Filed Successfully!

🆔 Complaint ID: {id}
📂 Category: {category}
📅 Date: {date_reported}
📊 Status: {status}

Your complaint has been registered. You will be contacted for further updates.""",
        TE: """✅ ఫిర్యాదు విజయవంతంగా దాఖలు చేయబడింది!

🆔 ఫిర్యాదు ID: {id}
📂 వర్గం: {category}
📅 తేదీ: {date_reported}
📊 స్థితి: {status}

మీ ఫిర్యాదు నమోదు చేయబడింది. మరిన్ని అప్‌డేట్‌ల కోసం మిమ్మల్ని సంప్రదిస్తారు.""",
    },
}


def render(name: str, lang: Language, **values: object) -> str:
    """Fill a template in the requested language.

    Args:
        name: Template key
        lang: Response language
        **values: Placeholder values

    Returns:
        Rendered text

    Raises:
        KeyError: If the template or a placeholder value is missing
    """
    template = TEMPLATES[name][Language(lang)]
    return template.format(**values) if values else template
